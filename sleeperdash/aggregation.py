"""Top performers and team leaderboards computed from a loaded snapshot.

Both functions are pure: they read the snapshot and return new lists.
Ties keep roster order since Python's sort is stable.
"""

from .constants import LEADERBOARD_CATEGORIES, POINTS, TOP_PERFORMERS_LIMIT, TOUCHDOWNS, YARDS
from .models import LeaderboardEntry, PerformerRow, Snapshot
from .schemas import Roster


def rostered_player_ids(snapshot: Snapshot) -> list[str]:
    """All player ids across rosters, in roster order, duplicates kept."""
    return [player_id for roster in snapshot.rosters for player_id in roster.players]


def top_performers(snapshot: Snapshot, limit: int = TOP_PERFORMERS_LIMIT) -> list[PerformerRow]:
    """
    Highest PPR scorers among rostered players.

    Args:
        snapshot: Fully loaded league snapshot
        limit: Maximum number of rows to return (default: 5)

    Returns:
        Rows sorted by pts_ppr, highest first. Players missing from the
        directory still appear with no name/team; players without stats
        score 0.
    """
    rows = [
        PerformerRow(
            player_id=player_id,
            player=snapshot.players.get(player_id),
            stats=snapshot.stat_line(player_id),
        )
        for player_id in rostered_player_ids(snapshot)
    ]
    rows.sort(key=lambda row: row.stats.pts_ppr, reverse=True)
    return rows[:limit]


def roster_totals(snapshot: Snapshot, roster: Roster) -> dict[str, float]:
    """Sum points, yards and touchdowns over every player on a roster."""
    totals = {category: 0.0 for category in LEADERBOARD_CATEGORIES}
    for player_id in roster.players:
        line = snapshot.stat_line(player_id)
        totals[POINTS] += line.pts_ppr
        totals[YARDS] += line.total_yards
        totals[TOUCHDOWNS] += line.td
    return totals


def leaderboards(snapshot: Snapshot) -> dict[str, list[LeaderboardEntry]]:
    """
    Per-team leaderboards for Points, Yards and Touchdowns.

    Rosters whose owner is not a league member are skipped. Every roster
    player counts, not only starters. Lists are sorted highest first and
    are not truncated.

    Args:
        snapshot: Fully loaded league snapshot

    Returns:
        Dict mapping category name to sorted leaderboard entries
    """
    boards: dict[str, list[LeaderboardEntry]] = {category: [] for category in LEADERBOARD_CATEGORIES}

    for roster in snapshot.rosters:
        user = snapshot.find_user(roster.owner_id)
        if user is None:
            continue

        totals = roster_totals(snapshot, roster)
        for category, value in totals.items():
            boards[category].append(LeaderboardEntry(team=user.team_name, value=value))

    for entries in boards.values():
        entries.sort(key=lambda entry: entry.value, reverse=True)

    return boards
