"""Pydantic schemas for Sleeper API payloads."""

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import DEFAULT_LEAGUE_ID, DEFAULT_TIMEOUT, DEFAULT_WEEK, SLEEPER_BASE_URL


class StatLine(BaseModel):
    """Weekly stat line for one player. Missing or null values read as 0."""

    pts_ppr: float = 0.0
    pass_yd: float = 0.0
    rush_yd: float = 0.0
    rec_yd: float = 0.0
    td: float = 0.0

    @field_validator('pts_ppr', 'pass_yd', 'rush_yd', 'rec_yd', 'td', mode='before')
    @classmethod
    def null_as_zero(cls, v):
        return 0.0 if v is None else v

    @property
    def total_yards(self) -> float:
        """Passing, rushing and receiving yards combined."""
        return self.pass_yd + self.rush_yd + self.rec_yd

    class Config:
        extra = 'ignore'


class PlayerStats(BaseModel):
    """Stats entry keyed by player id in the weekly stats mapping."""

    stats: StatLine = Field(default_factory=StatLine)

    @model_validator(mode='before')
    @classmethod
    def wrap_flat_stats(cls, data):
        """Accept both `{"stats": {...}}` and a flat stat record."""
        if data is None:
            return {'stats': {}}
        if isinstance(data, dict) and 'stats' not in data:
            return {'stats': data}
        if isinstance(data, dict) and data.get('stats') is None:
            return {'stats': {}}
        return data

    class Config:
        extra = 'ignore'


class Player(BaseModel):
    """Entry in the NFL player directory."""

    player_id: str
    full_name: str | None = None
    fantasy_positions: list[str] = Field(default_factory=list)
    team: str | None = None

    @field_validator('fantasy_positions', mode='before')
    @classmethod
    def null_as_empty(cls, v):
        return [] if v is None else v

    @property
    def primary_position(self) -> str | None:
        """First eligible fantasy position, if any."""
        return self.fantasy_positions[0] if self.fantasy_positions else None

    class Config:
        extra = 'ignore'


class UserMetadata(BaseModel):
    team_name: str | None = None

    class Config:
        extra = 'ignore'


class LeagueUser(BaseModel):
    """League member who owns a fantasy team."""

    user_id: str
    display_name: str = ''
    metadata: UserMetadata = Field(default_factory=UserMetadata)

    @field_validator('metadata', mode='before')
    @classmethod
    def null_as_empty(cls, v):
        return {} if v is None else v

    @property
    def team_name(self) -> str:
        """Team name, falling back to the owner's display name."""
        return self.metadata.team_name or self.display_name

    class Config:
        extra = 'ignore'


class Roster(BaseModel):
    """One fantasy team's players and starting lineup."""

    owner_id: str | None = None
    roster_id: int | None = None
    players: list[str] = Field(default_factory=list)
    starters: list[str] = Field(default_factory=list)

    @field_validator('players', 'starters', mode='before')
    @classmethod
    def null_as_empty(cls, v):
        return [] if v is None else v

    class Config:
        extra = 'ignore'


class DashboardConfig(BaseModel):
    """Dashboard configuration settings."""

    league_id: str = Field(DEFAULT_LEAGUE_ID, min_length=1)
    week: int = Field(DEFAULT_WEEK, ge=1, le=18)
    base_url: str = SLEEPER_BASE_URL
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)

    @field_validator('base_url')
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.rstrip('/')

    class Config:
        extra = 'forbid'
