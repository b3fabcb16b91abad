import logging
import sys
from typing import Optional

import structlog

from ..config import Config

ROOT_LOGGER_NAME = "reeks"
_FALLBACK_HANDLER_NAME = "reeks_fallback_handler"
_RENDERERS = ("json", "console")

# Renderer for library events. The process-wide structlog configuration
# belongs to the application and is never touched.
_renderer = "json"


def _build_processors(renderer: str):
    if renderer == "console":
        final = structlog.dev.ConsoleRenderer(colors=False)
    else:
        final = structlog.processors.JSONRenderer()
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        final,
    ]


def _sync_fallback_handler(library_logger: logging.Logger):
    """Attaches a stderr handler to the `reeks` logger only while the root logger has none."""
    fallback = [h for h in library_logger.handlers if h.get_name() == _FALLBACK_HANDLER_NAME]
    if logging.getLogger().handlers:
        for handler in fallback:
            library_logger.removeHandler(handler)
        return
    if not fallback:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.set_name(_FALLBACK_HANDLER_NAME)
        library_logger.addHandler(handler)


class StructlogLogger:
    """
    A structlog logger bound to the stdlib logger of the same name.

    The bound logger is built on each call, so loggers created at import time
    pick up a later `configure_logging`.
    """

    def __init__(self, name: str):
        self.name = name

    def _bound(self):
        return structlog.wrap_logger(
            logging.getLogger(self.name),
            processors=_build_processors(_renderer),
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
        )

    def debug(self, event: str, **data):
        if logging.getLogger(self.name).isEnabledFor(logging.DEBUG):
            self._bound().debug(event, **data)


def get_logger(name: str) -> StructlogLogger:
    """
    Returns a structlog logger for the given name.

    Nothing is configured here: events go to the stdlib logger `name` and
    follow whatever handlers and levels the application has set up.
    """
    return StructlogLogger(name)


def configure_logging(config: Optional[Config] = None) -> None:
    """
    Applies the `logging` section of a Config to the library loggers.

    Recognised keys:
        logging.level: a stdlib level name (default ``WARNING``).
        logging.renderer: ``json`` (default) or ``console``.

    :raises ValueError: If the level or renderer is not recognised.
    """
    global _renderer
    settings = (config or Config({})).section("logging")
    level_name = str(settings.get("level", "WARNING")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {level_name}")

    renderer = settings.get("renderer", "json")
    if renderer not in _RENDERERS:
        raise ValueError(f"logging.renderer must be one of {list(_RENDERERS)}")

    _renderer = renderer
    library_logger = logging.getLogger(ROOT_LOGGER_NAME)
    library_logger.setLevel(level)
    _sync_fallback_handler(library_logger)
