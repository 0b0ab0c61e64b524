"""The Blue Alliance API client for match keys and MotionWorks telemetry."""

import requests
from pydantic import ValidationError
from typing import Any, List, Optional
from concurrent.futures import ThreadPoolExecutor, as_completed

from src.conf.settings import settings
from src.schemas.telemetry import (
    ZebraMotionworks,
    MatchTelemetry,
    PresentTelemetry,
    AbsentTelemetry,
)
from src.utils.logging_utils import get_logger

logger = get_logger(__name__)


class AcquisitionError(Exception):
    """Raised when TBA data cannot be fetched or parsed."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def team_key(team: int) -> str:
    """TBA team key for a team number (254 -> 'frc254')."""
    return f"frc{team}"


class TBAClient:
    """Thin read-only client for the TBA v3 API."""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize client.

        Args:
            api_key: TBA read API key
            base_url: API root (defaults to settings.tba_base_url)
            timeout: Per-request timeout in seconds
            session: Pre-built session (mainly for tests)
        """
        self.base_url = (base_url or settings.tba_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_sec
        self.session = session or requests.Session()
        self.session.headers.update({settings.tba_auth_header: api_key})

    def _get(self, path: str, allow_not_found: bool = False) -> Any:
        """GET a path and decode the JSON body.

        Args:
            path: Path below the API root
            allow_not_found: Return None on 404 instead of raising

        Returns:
            Decoded JSON (None for an allowed 404)
        """
        url = f"{self.base_url}{path}"

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise AcquisitionError(f"Request to {url} failed: {e}", url=url) from e

        if allow_not_found and response.status_code == 404:
            return None

        if response.status_code != 200:
            raise AcquisitionError(
                f"Status code: {response.status_code} from {url}",
                url=url,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise AcquisitionError(f"Could not parse response from {url}: {e}", url=url) from e

    def get_match_keys(self, team: int, event: str) -> List[str]:
        """List match keys for a team at an event."""
        body = self._get(f"/team/{team_key(team)}/event/{event}/matches/keys")

        if not isinstance(body, list):
            raise AcquisitionError(
                f"Expected a list of match keys for team {team} at {event}, got {type(body).__name__}"
            )

        return [str(key) for key in body]

    def get_motionworks(self, team: int, match_key: str) -> MatchTelemetry:
        """Fetch one team's MotionWorks positions for a match.

        Missing telemetry (404, empty body, team not tracked) is not an
        error and comes back as AbsentTelemetry.
        """
        body = self._get(f"/match/{match_key}/zebra_motionworks", allow_not_found=True)

        if not body:
            return MatchTelemetry(match_key, team, AbsentTelemetry("no motionworks data"))

        try:
            payload = ZebraMotionworks.model_validate(body)
        except ValidationError as e:
            raise AcquisitionError(f"Malformed motionworks data for match {match_key}: {e}") from e

        points = payload.positions_for(team_key(team))
        if points is None:
            logger.warning(f"  {match_key}: team {team} not found in either alliance")
            return MatchTelemetry(match_key, team, AbsentTelemetry("team not tracked"))

        return MatchTelemetry(match_key, team, PresentTelemetry(points))


def fetch_event_telemetry(
    team: int,
    event: str,
    api_key: str,
    max_workers: Optional[int] = None,
    client: Optional[TBAClient] = None,
) -> List[MatchTelemetry]:
    """Fetch MotionWorks telemetry for every match a team played at an event.

    Match fetches run concurrently; the call returns once all of them have
    finished, with results in match-key order. The first failed fetch
    cancels whatever has not started yet and is re-raised.

    Args:
        team: Team number
        event: Event key (e.g. '2020scmb')
        api_key: TBA read API key
        max_workers: Concurrent fetches (defaults to settings.max_workers)
        client: Pre-built client (mainly for tests)

    Returns:
        One MatchTelemetry per match key, including matches without telemetry

    Raises:
        AcquisitionError: On any network, status or parse failure
    """
    client = client or TBAClient(api_key)
    max_workers = max_workers or settings.max_workers

    logger.info("=" * 60)
    logger.info(f"FETCH: team {team} at {event}")
    logger.info("=" * 60)

    match_keys = client.get_match_keys(team, event)
    logger.info(f"  Found {len(match_keys)} matches")

    if not match_keys:
        return []

    results = {}
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(client.get_motionworks, team, key): key for key in match_keys
        }
        try:
            for future in as_completed(futures):
                results[futures[future]] = future.result()
        except AcquisitionError as e:
            logger.error(f"  Fetch failed: {e}")
            for future in futures:
                future.cancel()
            raise

    records = [results[key] for key in match_keys]

    with_data = sum(1 for r in records if r.has_telemetry)
    logger.info(f"  Telemetry available for {with_data}/{len(records)} matches")

    return records
