from __future__ import annotations
import logging

from .config import LOG_LEVEL

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(*, level: str | None = None, fmt: str = _DEFAULT_FORMAT) -> None:
    """Configure root logging. The engine itself never adds handlers."""

    if level is None:
        level = LOG_LEVEL
    level = level.upper()

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=fmt)
    root_logger.setLevel(level)
