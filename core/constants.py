"""Constants for the Redis demo client."""

from enum import Enum


class DemoStep(str, Enum):
    PING = "ping"
    SET = "set"
    GET = "get"
    SET_STRUCT = "set-struct"


# Runs every step in this order
STEP_ALL = "all"
DEFAULT_STEPS = [DemoStep.SET_STRUCT]

# Liveness probe acknowledgement
PING_ACK = "PONG"


# =============================================================================
# Demo Data
# =============================================================================

FAVORITE_MOVIE_KEY = "Favorite Movie"
FAVORITE_MOVIE_VALUE = "Repo Man"

RELEASE_YEAR_KEY = "Release Year"
RELEASE_YEAR_VALUE = 1984

NONEXISTENT_KEY = "Nonexistent Key"

# Key under which the serialized demo user is stored
USER_OBJECT_KEY = "12345"


# =============================================================================
# Logging
# =============================================================================

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
