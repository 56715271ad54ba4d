# Court Constants
PLAYERS_PER_COURT = 4
MIN_PLAYERS = 4

# Setup Constants
DEFAULT_NUM_COURTS = 2
DEFAULT_DURATION_HOURS = 2.0  # Session length in hours
DEFAULT_ROUND_MINUTES = 15  # Length of one round in minutes

# Dial Bounds (enforced by the setup page widgets)
MIN_DURATION_HOURS = 1.0
MAX_DURATION_HOURS = 8.0
DURATION_STEP_HOURS = 0.5
MIN_ROUND_MINUTES = 5
MAX_ROUND_MINUTES = 60
ROUND_MINUTES_STEP = 1

# Logging
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

DEFAULT_PLAYER_INPUT = "\n".join(f"Player {i}" for i in range(1, 11))
