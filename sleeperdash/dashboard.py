"""Dashboard view model and text rendering.

The view model is plain JSON-ready data: skeleton rows while loading,
an error banner on failure, formatted tables once a snapshot is ready.
"""

from typing import Any

from .aggregation import leaderboards, top_performers
from .constants import LEADERBOARD_CATEGORIES, LEADERBOARD_DISPLAY_LIMIT, POINTS, SKELETON_ROWS
from .loader import DataLoader, LoadStatus
from .models import LeaderboardEntry, PerformerRow


def format_points(value: float | None) -> str:
    return f'{value or 0:.2f}'


def format_category_value(category: str, value: float) -> str | int:
    """Points keep two decimals; yards and touchdowns are whole numbers."""
    if category == POINTS:
        return format_points(value)
    return int(round(value))


def performer_view(rank: int, row: PerformerRow) -> dict[str, Any]:
    return {
        'rank': rank,
        'player_id': row.player_id,
        'name': row.name,
        'team': row.team,
        'position': row.position,
        'points': format_points(row.stats.pts_ppr),
    }


def leaderboard_view(category: str, entries: list[LeaderboardEntry]) -> list[dict[str, Any]]:
    return [
        {
            'rank': rank,
            'team': entry.team,
            'value': format_category_value(category, entry.value),
            'badge': 'default' if rank == 1 else 'secondary',
        }
        for rank, entry in enumerate(entries[:LEADERBOARD_DISPLAY_LIMIT], 1)
    ]


def skeleton_rows() -> list[dict[str, bool]]:
    return [{'placeholder': True} for _ in range(SKELETON_ROWS)]


def build_dashboard(loader: DataLoader) -> dict[str, Any]:
    """
    Build the dashboard view model from the loader's current state.

    Args:
        loader: DataLoader whose status and snapshot are rendered

    Returns:
        Dict with 'status', 'league_id', 'week', 'error', 'top_performers'
        and 'leaderboards' keys
    """
    view: dict[str, Any] = {
        'status': loader.status.value,
        'league_id': loader.config.league_id,
        'week': loader.config.week,
        'error': None,
        'top_performers': [],
        'leaderboards': {category: [] for category in LEADERBOARD_CATEGORIES},
    }

    if loader.status is LoadStatus.ERROR:
        view['error'] = {'title': 'Error', 'message': loader.error}
        return view

    snapshot = loader.snapshot
    if loader.status is not LoadStatus.READY or snapshot is None:
        view['top_performers'] = skeleton_rows()
        view['leaderboards'] = {category: skeleton_rows() for category in LEADERBOARD_CATEGORIES}
        return view

    view['top_performers'] = [
        performer_view(rank, row) for rank, row in enumerate(top_performers(snapshot), 1)
    ]
    view['leaderboards'] = {
        category: leaderboard_view(category, entries)
        for category, entries in leaderboards(snapshot).items()
    }
    return view


def _table(headers: list[str], rows: list[list[Any]]) -> list[str]:
    cells = [[('' if value is None else str(value)) for value in row] for row in rows]
    widths = [
        max([len(header)] + [len(row[i]) for row in cells]) for i, header in enumerate(headers)
    ]
    lines = ['  '.join(header.ljust(width) for header, width in zip(headers, widths))]
    lines.append('  '.join('-' * width for width in widths))
    for row in cells:
        lines.append('  '.join(value.ljust(width) for value, width in zip(row, widths)))
    return lines


def format_dashboard_text(view: dict[str, Any]) -> str:
    """Render a view model as fixed-width text tables."""
    lines = [f"Fantasy Football Dashboard - league {view['league_id']}, week {view['week']}", '']

    if view['error']:
        lines.append(f"{view['error']['title']}: {view['error']['message']}")
        return '\n'.join(lines)

    if view['status'] != LoadStatus.READY.value:
        lines.append('Loading...')
        return '\n'.join(lines)

    lines.append('Top Performers This Week')
    lines.extend(_table(
        ['Player', 'Team', 'Position', 'Points'],
        [[p['name'], p['team'], p['position'], p['points']] for p in view['top_performers']],
    ))

    for category, rows in view['leaderboards'].items():
        lines.append('')
        lines.append(f'Weekly Leaderboard: {category}')
        lines.extend(_table(
            ['Rank', 'Team', category],
            [[row['rank'], row['team'], row['value']] for row in rows],
        ))

    return '\n'.join(lines)
