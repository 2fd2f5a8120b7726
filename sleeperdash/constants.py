"""Constants for the Sleeper weekly dashboard."""

SLEEPER_BASE_URL = 'https://api.sleeper.app/v1'

# Placeholder defaults until a league is configured
DEFAULT_LEAGUE_ID = 'your_league_id_here'
DEFAULT_WEEK = 1
DEFAULT_TIMEOUT = 30.0

# Leaderboard categories, in display order
POINTS = 'Points'
YARDS = 'Yards'
TOUCHDOWNS = 'Touchdowns'
LEADERBOARD_CATEGORIES = (POINTS, YARDS, TOUCHDOWNS)

# Rows shown per table
TOP_PERFORMERS_LIMIT = 5
LEADERBOARD_DISPLAY_LIMIT = 5
SKELETON_ROWS = 5

# User-facing messages
LOAD_ERROR_MESSAGE = 'Failed to fetch data. Please try again later.'
INVALID_ENDPOINT_MESSAGE = 'Invalid endpoint'
RELAY_ERROR_MESSAGE = 'Error fetching data from Sleeper API'
