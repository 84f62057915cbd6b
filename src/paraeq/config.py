import logging
import os
import sys

LOG_LEVEL_ENV = "PARAEQ_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def resolve_level(level) -> int:
    """Turn a level name or number into a logging level, using INFO for names logging does not know."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return resolved


def create_logger(name="paraeq", level=None) -> logging.Logger:
    """Return the package logger, attaching a stderr handler once.

    Records always go to stderr since stdout carries the JSON document when running as a pandoc filter.
    """
    log = logging.getLogger(name)
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    log.setLevel(resolve_level(level))

    if not any(getattr(h, "_paraeq_handler", False) for h in log.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        handler._paraeq_handler = True
        log.addHandler(handler)

    return log


logger = create_logger()
