"""Sleeper API client."""

import logging
from typing import Any, Optional

import requests

from .constants import DEFAULT_TIMEOUT, SLEEPER_BASE_URL

logger = logging.getLogger('sleeperdash.client')


class SleeperAPIError(Exception):
    """Raised when a Sleeper API request fails or returns an undecodable body."""


class SleeperClient:
    """Thin read-only client for the Sleeper v1 API."""

    def __init__(
        self,
        base_url: str = SLEEPER_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': 'Sleeper-Weekly-Dashboard/1.0'})

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str, check_status: bool = True) -> Any:
        """
        GET a path under the base URL and decode the JSON body.

        Args:
            path: Path relative to the base URL (e.g. 'players/nfl')
            check_status: Raise on 4xx/5xx responses (default: True)

        Returns:
            Decoded JSON body

        Raises:
            SleeperAPIError: On network failure, error status, or invalid JSON
        """
        url = self.url_for(path)
        logger.debug(f'GET {url}')

        try:
            response = self.session.get(url, timeout=self.timeout)
            if check_status:
                response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f'Request to {url} failed: {e}')
            raise SleeperAPIError(f'Request to {url} failed: {e}') from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f'Invalid JSON from {url}: {e}')
            raise SleeperAPIError(f'Invalid JSON from {url}') from e

    def get_league_users(self, league_id: str) -> list[dict]:
        return self.get_json(f'league/{league_id}/users')

    def get_league_rosters(self, league_id: str) -> list[dict]:
        return self.get_json(f'league/{league_id}/rosters')

    def get_players(self) -> dict[str, dict]:
        """Full NFL player directory keyed by player id (a large payload)."""
        return self.get_json('players/nfl')

    def get_week_stats(self, week: int) -> dict[str, dict]:
        return self.get_json(f'stats/nfl/{week}')

    def close(self) -> None:
        self.session.close()
