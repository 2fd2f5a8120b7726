from .schemas import (
    DashboardConfig,
    LeagueUser,
    Player,
    PlayerStats,
    Roster,
    StatLine,
)
from .models import LeaderboardEntry, PerformerRow, Snapshot
from .client import SleeperAPIError, SleeperClient
from .config import clear_config_cache, config_from_env, get_config
from .loader import DataLoader, LoadError, LoadStatus
from .aggregation import leaderboards, top_performers
from .dashboard import build_dashboard, format_dashboard_text
from .relay import relay_request

__all__ = [
    # Schemas
    'DashboardConfig',
    'LeagueUser',
    'Player',
    'PlayerStats',
    'Roster',
    'StatLine',
    # Models
    'LeaderboardEntry',
    'PerformerRow',
    'Snapshot',
    # Sleeper API
    'SleeperAPIError',
    'SleeperClient',
    # Configuration
    'clear_config_cache',
    'config_from_env',
    'get_config',
    # Loading
    'DataLoader',
    'LoadError',
    'LoadStatus',
    # Aggregation
    'leaderboards',
    'top_performers',
    # Presentation
    'build_dashboard',
    'format_dashboard_text',
    # Relay
    'relay_request',
]
