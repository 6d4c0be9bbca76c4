from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach the stream handler to the package logger once and set its level."""
    log = logging.getLogger("yardsale")
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    log.setLevel(resolved)
    if _handler not in log.handlers:
        log.addHandler(_handler)
    return log
