import logging
import os
import sys
import warnings

ROOT = "kselect"
LEVEL_VAR = "KSELECT_LOG_LEVEL"

logging.getLogger(ROOT).addHandler(logging.NullHandler())


def _resolve_level(value: str) -> int | None:
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else None


def _configure_root() -> None:
    root = logging.getLogger(ROOT)
    value = os.environ.get(LEVEL_VAR)
    if not value or any(
        isinstance(h, logging.StreamHandler) for h in root.handlers
    ):
        return
    level = _resolve_level(value)
    if level is None:
        warnings.warn(f"ignoring unknown {LEVEL_VAR}={value!r}")
        return
    root.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a kselect module. If KSELECT_LOG_LEVEL names a
    logging level (or is a number), the package logger also gets a stdout
    handler at that level, once. Unknown values are ignored with a warning.
    """
    _configure_root()
    if name != ROOT and not name.startswith(ROOT + "."):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)
