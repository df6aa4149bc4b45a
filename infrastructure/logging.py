import logging
import logging.handlers
import sys

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from infrastructure.config import settings

# Library loggers that should write through our handlers instead of their own.
_ROUTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")

_configured = False


def _add_service_name(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("service", settings.app_name)
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service_name,
        structlog.processors.StackInfoRenderer(),
    ]


def _final_renderer() -> Processor:
    if settings.app_env == "development":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def _build_handlers(formatter: logging.Formatter) -> list[logging.Handler]:
    settings.log_dir.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    # Orphaned images are reported in these logs; keep two weeks for manual cleanup.
    rotating_file = logging.handlers.TimedRotatingFileHandler(
        settings.log_dir / f"{settings.app_env}.log",
        when="midnight",
        backupCount=14,
        encoding="utf-8",
    )
    for handler in (console, rotating_file):
        handler.setFormatter(formatter)
    return [console, rotating_file]


def setup_logging() -> None:
    """Route structlog and stdlib records (uvicorn, fastapi, httpx) through one formatter.

    Safe to call more than once; handlers are only attached the first time.
    """
    global _configured  # noqa: PLW0603
    if _configured:
        return

    shared = _shared_processors()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _final_renderer(),
        ],
    )
    handlers = _build_handlers(formatter)

    root_logger = logging.getLogger()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level.upper())

    for name in _ROUTED_LOGGERS:
        library_logger = logging.getLogger(name)
        library_logger.handlers = list(handlers)
        library_logger.propagate = False

    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _configured = True
