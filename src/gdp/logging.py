"""Process-wide logger for GDP."""
import logging
import sys

from gdp.config import settings

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _configure() -> logging.Logger:
    log = logging.getLogger("gdp")
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        log.addHandler(handler)
    log.setLevel(settings.LOG_LEVEL.upper())
    return log


logger = _configure()
