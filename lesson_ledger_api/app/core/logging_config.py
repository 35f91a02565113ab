"""
Logging setup for the Lesson Ledger API.

Services log every write at INFO (who changed which member's balance,
which post was removed) so the log doubles as a coarse audit trail.
Store failures are logged at ERROR by the handler in ``main``.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Reload watchers are chatty at INFO and say nothing about requests.
NOISY_LOGGERS = ("watchfiles", "watchfiles.main", "multipart")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Does nothing if the root logger already has handlers, so repeated
    ``create_app`` calls in tests do not duplicate output.  Unknown
    level names fall back to ``INFO``.  Loggers named in ``quiet`` are
    raised to ``WARNING``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)
