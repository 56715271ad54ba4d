# logger.py
"""
Logging configuration for the Padel Scheduler.

This module provides centralized logging setup. The setup_logging() function
should be called once at application startup (in 1_Setup.py).

All app modules should use the "app" namespace:
    import logging
    logger = logging.getLogger("app.module_name")

This keeps third-party library logs quiet while allowing granular control
over the app's own logging level via the LOG_LEVEL environment variable.
"""

import logging
import os
import sys

from constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

# App namespace prefix - all app loggers should use this
APP_LOGGER_NAME = "app"


def get_app_log_level() -> int:
    """Reads the app log level from the environment, falling back to INFO."""
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(app_level: int | None = None) -> None:
    """
    Configure logging for the application.

    - Root logger is set to WARNING (keeps third-party libraries quiet)
    - App namespace logger ("app.*") is set to the specified level

    This should be called ONCE at application startup (entry point).

    Args:
        app_level: The logging level for app modules (default: from LOG_LEVEL)
    """
    if app_level is None:
        app_level = get_app_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    # Avoid adding duplicate handlers on Streamlit reruns
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)  # Handler accepts all; loggers filter

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)

        root_logger.addHandler(handler)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(app_level)


def log_round_debug(
    logger: logging.Logger,
    round_index: int,
    courts,
    resting,
) -> None:
    """
    Log one generated round in a consistent format.

    Args:
        logger: Logger instance to use
        round_index: Zero-based round index
        courts: Courts of the round, in court order
        resting: Players sitting out the round
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    for court_index, court in enumerate(courts):
        logger.debug(
            "Round %d Court %d: %s vs %s",
            round_index + 1,
            court_index + 1,
            " & ".join(court.team_1),
            " & ".join(court.team_2),
        )
    logger.debug("Round %d Resting: %s", round_index + 1, ", ".join(resting) or "-")
