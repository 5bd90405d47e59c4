"""Logging setup shared by the API server and the admin CLI.

Levels are configured per category so the outbound HTTP chatter of the
spreadsheet backend can be turned down without hiding pipeline logs.

Usage:
    from hoops.infrastructure.logging.log_config import setup_logging
    setup_logging(settings)   # once, from the lifespan or hoops-admin
"""

import logging
import sys

from hoops.config import Settings, get_settings
from hoops.infrastructure.logging.colored_logger import PIPELINE_LOGGER_NAME

_FORMAT = "%(levelname)-8s %(name)s — %(message)s"

# Settings field → loggers it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore", "hoops.infrastructure.spreadsheets"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_pipeline": (PIPELINE_LOGGER_NAME,),
}


def _parse_level(raw: str) -> int:
    """Level name → logging constant; unknown names fall back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings | None = None) -> None:
    """Apply the root and per-category levels from ``settings``."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn installs its own handler; the CLI and tests may have none.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    for field_name, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s http=%s uvicorn=%s pipeline=%s",
        settings.log_level,
        settings.log_level_http,
        settings.log_level_uvicorn,
        settings.log_level_pipeline,
    )
