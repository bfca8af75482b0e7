import logging
import sys

from core.config import get_config

PACKAGE_LOGGERS = ("core", "handlers")


def setup_logger() -> None:
    """Configure the package loggers that module loggers propagate to.

    Lambda captures stdout, so a single stream handler is attached. Safe to
    call on every invocation: handlers are only added once.
    """
    level = get_config().log_level
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # avoid adding multiple handlers on warm invocations
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            logger.propagate = False
