"""Project logger and its CLI-facing setup.

Every module logs through :data:`logger` (``logging.getLogger("shapeweave")``),
which stays silent behind a ``NullHandler`` until :func:`init_logging` is
called.  Placement restarts are logged at ``DEBUG`` since a single image may
restart thousands of times; per-caption progress and fresh seeds at ``INFO``.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger("shapeweave")
logger.addHandler(logging.NullHandler())

# ``none`` silences the package logger entirely.
_LEVEL_MAP = {
    "none": None,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_FMT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"


def resolve_level(level: int | str | None) -> Optional[int]:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    key = str(level).strip().lower()
    if key not in _LEVEL_MAP:
        raise ValueError(f"unknown log level {level!r}; expected one of {sorted(_LEVEL_MAP)}")
    return _LEVEL_MAP[key]


def init_logging(level: int | str | None = "info", log_file: str | Path | None = None) -> None:
    """Attach a stderr handler (and optionally a file handler) to :data:`logger`.

    Safe to call repeatedly: handlers from a previous call are replaced, never
    stacked.  Also used as the process-pool initializer so workers log at the
    same level as the parent.
    """
    lvl = resolve_level(level)

    for h in [h for h in logger.handlers if getattr(h, "_shapeweave", False)]:
        logger.removeHandler(h)
        h.close()

    if lvl is None:
        logger.setLevel(logging.CRITICAL + 1)
        return

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for h in handlers:
        h.setFormatter(logging.Formatter(fmt=_FMT, datefmt=_DATEFMT))
        h._shapeweave = True  # type: ignore[attr-defined]
        logger.addHandler(h)
    logger.setLevel(lvl)


def worker_level() -> Optional[int]:
    """Level to replay in worker processes, or ``None`` if logging was never set up."""
    if any(getattr(h, "_shapeweave", False) for h in logger.handlers):
        return logger.level
    return None


__all__ = ["logger", "init_logging", "resolve_level", "worker_level"]
