"""Loads one league week from Sleeper into an atomic snapshot."""

import enum
import logging
import threading
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from .client import SleeperAPIError, SleeperClient
from .constants import LOAD_ERROR_MESSAGE
from .models import Snapshot
from .schemas import DashboardConfig, LeagueUser, Player, PlayerStats, Roster

logger = logging.getLogger('sleeperdash.loader')

USERS_ADAPTER = TypeAdapter(list[LeagueUser])
ROSTERS_ADAPTER = TypeAdapter(list[Roster])
PLAYERS_ADAPTER = TypeAdapter(dict[str, Player])
STATS_ADAPTER = TypeAdapter(dict[str, PlayerStats])


class LoadError(Exception):
    """Any failure while loading a snapshot. Always carries the generic message."""

    def __init__(self, message: str = LOAD_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class LoadStatus(str, enum.Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    READY = 'ready'
    ERROR = 'error'


class DataLoader:
    """
    Fetches users, rosters, players and weekly stats for a configured league.

    The published snapshot is only replaced once all four reads have
    succeeded. After a failed load the previous snapshot is kept but
    flagged stale. Only one load runs at a time; refresh() ignores
    triggers that arrive while a load is in flight.
    """

    def __init__(self, config: DashboardConfig, client: Optional[SleeperClient] = None):
        self.config = config
        self.client = client or SleeperClient(base_url=config.base_url, timeout=config.timeout)
        self.status = LoadStatus.IDLE
        self.error: Optional[str] = None
        self._snapshot: Optional[Snapshot] = None
        self._lock = threading.Lock()

    @property
    def snapshot(self) -> Optional[Snapshot]:
        """Last successfully loaded snapshot, if any."""
        return self._snapshot

    @property
    def is_loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def is_stale(self) -> bool:
        """True when the shown snapshot predates a failed load."""
        return self.status is LoadStatus.ERROR and self._snapshot is not None

    def load(self) -> Snapshot:
        """
        Run one load cycle, waiting for any load already in flight.

        Returns:
            The newly published snapshot

        Raises:
            LoadError: If any of the four reads fails
        """
        with self._lock:
            return self._run()

    def refresh(self) -> Optional[Snapshot]:
        """
        Start a load cycle unless one is already running.

        Returns:
            The new snapshot, or None if the trigger was ignored

        Raises:
            LoadError: If any of the four reads fails
        """
        if not self._lock.acquire(blocking=False):
            logger.info('Refresh ignored: a load is already in progress')
            return None
        try:
            return self._run()
        finally:
            self._lock.release()

    def _run(self) -> Snapshot:
        self.status = LoadStatus.LOADING
        self.error = None
        logger.info(f'Loading league {self.config.league_id} week {self.config.week}')

        try:
            snapshot = self.fetch_snapshot()
        except (SleeperAPIError, ValidationError) as e:
            logger.error(f'Load failed for league {self.config.league_id}: {e}')
            self.status = LoadStatus.ERROR
            self.error = LOAD_ERROR_MESSAGE
            raise LoadError() from e

        self._snapshot = snapshot
        self.status = LoadStatus.READY
        logger.info(
            f'Loaded {len(snapshot.users)} users, {len(snapshot.rosters)} rosters, '
            f'{len(snapshot.players)} players, {len(snapshot.stats)} stat lines'
        )
        return snapshot

    def fetch_snapshot(self) -> Snapshot:
        """Perform the four reads and decode them, without touching loader state."""
        league_id = self.config.league_id

        users = USERS_ADAPTER.validate_python(self.client.get_league_users(league_id))
        rosters = ROSTERS_ADAPTER.validate_python(self.client.get_league_rosters(league_id))
        players = PLAYERS_ADAPTER.validate_python(self.client.get_players())
        stats = STATS_ADAPTER.validate_python(self.client.get_week_stats(self.config.week))

        return Snapshot(users=users, rosters=rosters, players=players, stats=stats)
