# COMPONENT: CENTRALIZED LOGGING CONFIGURATION
# REQUIREMENTS SATISFIED: Deterministic logging behavior, environment-controlled verbosity
"""
ai_model_registry/utils/logging.py

Provides the centralized logging configuration for the registry backend.
This module configures a shared logger instance ("ai_model_registry")
whose behavior is fully controlled via environment variables.

Environment Variables:
    LOG_LEVEL:
        0 → Silent (no logs emitted)
        1 → INFO level logging
        2 → DEBUG level logging

    LOG_FILE:
        Optional path to a log file. If provided and writable, logs are
        written to this file. Otherwise, logs fall back to standard error.

Design Decisions:
    - Logging is isolated from the root logger to prevent duplicate output.
    - Existing handlers are cleared on setup so calling it again (tests,
      reloads) does not stack handlers.
    - The logger instance is created eagerly at import time so that the
      repository, service, routers and middleware share one configuration.
"""
import os
import sys
import logging

LOGGER_NAME = "ai_model_registry"


def setup_logger():
    """
    Configures and returns the shared logger based on the LOG_FILE and
    LOG_LEVEL environment variables.
    """
    log_file = os.environ.get("LOG_FILE")
    try:
        # LOG_LEVEL=0 is silent, 1 is INFO, 2 is DEBUG
        log_level_env = int(os.environ.get("LOG_LEVEL", "0"))
    except ValueError:
        log_level_env = 0

    logger = logging.getLogger(LOGGER_NAME)

    # Prevent logs from being propagated to the root logger
    logger.propagate = False

    if log_level_env == 1:
        logger.setLevel(logging.INFO)
    elif log_level_env >= 2:
        logger.setLevel(logging.DEBUG)
    else:
        # For LOG_LEVEL=0, set a level that will not log anything
        logger.setLevel(logging.CRITICAL + 1)

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler = None
    if log_file and log_level_env > 0:
        try:
            handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError:
            # Unusable path: fall back to console
            handler = logging.StreamHandler(sys.stderr)
    elif log_level_env > 0:
        handler = logging.StreamHandler(sys.stderr)

    if handler:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


# Create a single logger instance that can be imported by other files
logger = setup_logger()
