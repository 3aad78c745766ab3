import logging
from pathlib import Path
from typing import Any

import structlog

from svcspec.config.settings import get_settings


def resolve_log_level(level: int | str | None = None) -> int:
    """Turn a level name or number into a logging level; None reads SVCSPEC_LOG_LEVEL."""

    if level is None:
        level = get_settings().log_level
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: int | str | None = None) -> None:
    """Configure structlog/standard logging bridge."""

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            timestamper,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=resolve_log_level(level), format="%(message)s")


def spec_file_logger(path: str | Path, **kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Logger bound to the spec file being read or written."""

    logger = structlog.get_logger()
    return logger.bind(spec_file=Path(path).name, spec_dir=str(Path(path).parent), **kwargs)
