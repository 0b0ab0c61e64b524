"""IO utilities for file operations and data persistence."""

from pathlib import Path
from typing import Any, Dict
import orjson


def ensure_dir(path: str | Path) -> Path:
    """Ensure directory exists, create if needed.

    Args:
        path: Directory path

    Returns:
        Path object
    """
    path_obj = Path(path)
    path_obj.mkdir(parents=True, exist_ok=True)
    return path_obj


def save_json(data: Dict[str, Any], file_path: str | Path) -> Path:
    """Save data as compact JSON file.

    Args:
        data: Data to save
        file_path: Output file path

    Returns:
        Path to the written file
    """
    path_obj = Path(file_path)
    ensure_dir(path_obj.parent)

    with open(path_obj, "wb") as f:
        f.write(orjson.dumps(data, option=orjson.OPT_SERIALIZE_NUMPY))

    return path_obj


def load_json(file_path: str | Path) -> Dict[str, Any]:
    """Load JSON file.

    Args:
        file_path: Path to JSON file

    Returns:
        Loaded data
    """
    with open(file_path, "rb") as f:
        return orjson.loads(f.read())
