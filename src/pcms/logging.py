"""Structured logging configuration.

JSON logs on stdout through structlog's stdlib integration. Request-scoped
context (request_id, method, path) is bound by RequestIDMiddleware and merged
into every event through structlog.contextvars.
"""

import logging
import logging.config
import sys
from typing import Any

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.stdlib import BoundLogger
from structlog.typing import EventDict, Processor

from pcms.utils.datetime import utc_now


class LoggingSettings(BaseSettings):
    """Logging settings from environment variables."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    service_name: str = Field(default="pcms", alias="SERVICE_NAME")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def _add_timestamp(_logger: object, _method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["timestamp"] = utc_now().isoformat()
    return event_dict


def _service_binder(service_name: str) -> Processor:
    def add_service(_logger: object, _method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service_name)
        return event_dict

    return add_service


def configure_logging(settings: LoggingSettings) -> None:
    """Configure structlog and the root stdlib logger for JSON output.

    Runs once when this module is first imported. Foreign loggers
    (uvicorn, sqlalchemy) go through the same formatter via foreign_pre_chain.
    """
    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        _service_binder(settings.service_name),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processor": structlog.processors.JSONRenderer(),
                "foreign_pre_chain": shared,
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "": {"handlers": ["default"], "level": settings.log_level, "propagate": True},
            # Engine echo is controlled by Settings.db_echo; keep the logger quiet otherwise.
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    }
    logging.config.dictConfig(config)


configure_logging(LoggingSettings())


def get_logger(name: str) -> BoundLogger:
    """Get a structured logger, typically with ``__name__``.

    logger = get_logger(__name__)
    logger.info("member_created", member_id=member.member_id)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
