"""Data models for the Sleeper weekly dashboard."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .schemas import LeagueUser, Player, PlayerStats, Roster, StatLine


@dataclass(frozen=True)
class Snapshot:
    """The four jointly-loaded collections for one league week."""
    users: List[LeagueUser] = field(default_factory=list)
    rosters: List[Roster] = field(default_factory=list)
    players: Dict[str, Player] = field(default_factory=dict)
    stats: Dict[str, PlayerStats] = field(default_factory=dict)

    def stat_line(self, player_id: str) -> StatLine:
        """Stats for a player, or a zero line if the player has none."""
        entry = self.stats.get(player_id)
        return entry.stats if entry is not None else StatLine()

    def find_user(self, user_id: Optional[str]) -> Optional[LeagueUser]:
        """Resolve a roster owner to a league member."""
        for user in self.users:
            if user.user_id == user_id:
                return user
        return None


@dataclass(frozen=True)
class PerformerRow:
    """One rostered player's weekly line."""
    player_id: str
    player: Optional[Player]  # None when missing from the player directory
    stats: StatLine

    @property
    def name(self) -> Optional[str]:
        return self.player.full_name if self.player else None

    @property
    def team(self) -> Optional[str]:
        return self.player.team if self.player else None

    @property
    def position(self) -> Optional[str]:
        return self.player.primary_position if self.player else None


@dataclass(frozen=True)
class LeaderboardEntry:
    """A fantasy team's total in one leaderboard category."""
    team: str
    value: float
