"""Structured logging configuration.

Features:
- JSON and text format support
- Request ID correlation
- Service context injection
"""

import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from shared.config import LogFormat, LogLevel, get_settings

# Context variables for request tracking
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
service_id_var: ContextVar[str | None] = ContextVar("service_id", default=None)


def add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add service context to log events."""
    settings = get_settings()
    event_dict["service"] = settings.app_name
    event_dict["environment"] = settings.environment.value
    return event_dict


def add_request_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add request context from context variables."""
    if request_id := request_id_var.get():
        event_dict["request_id"] = request_id
    if service_id := service_id_var.get():
        event_dict.setdefault("service_id", service_id)
    return event_dict


def add_timestamp(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add ISO 8601 timestamp."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def setup_logging(
    service_name: str | None = None,
    log_level: LogLevel | None = None,
    log_format: LogFormat | None = None,
) -> None:
    """Configure structured logging for the application.

    Args:
        service_name: Override service name (defaults to settings.app_name)
        log_level: Override log level (defaults to settings.log_level)
        log_format: Override log format (defaults to settings.log_format)
    """
    settings = get_settings()

    level = log_level or settings.log_level
    fmt = log_format or settings.log_format

    # LogLevel enum or plain string
    level_str = level.value if hasattr(level, "value") else str(level).upper()
    numeric_level = getattr(logging, level_str)

    logging.basicConfig(
        level=numeric_level,
        stream=sys.stdout,
        format="%(message)s",
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_timestamp,
        add_service_context,
        add_request_context,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if service_name:
        shared_processors.append(_static_field("service", service_name))

    fmt_str = fmt.value if hasattr(fmt, "value") else str(fmt).lower()
    if fmt_str == LogFormat.JSON.value:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Suppress noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def _static_field(key: str, value: str) -> Processor:
    def processor(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict[key] = value
        return event_dict

    return processor


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (defaults to module name)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


class RequestContextManager:
    """Context manager for request-scoped logging context.

    Usage:
        async with RequestContextManager(request_id="abc123", service_id="checkout"):
            logger.info("Processing request")  # Includes request_id and service_id
    """

    def __init__(
        self,
        request_id: str | None = None,
        service_id: str | None = None,
    ):
        self.request_id = request_id
        self.service_id = service_id
        self._tokens: list[tuple[ContextVar, Any]] = []

    def __enter__(self) -> "RequestContextManager":
        if self.request_id:
            self._tokens.append((request_id_var, request_id_var.set(self.request_id)))
        if self.service_id:
            self._tokens.append((service_id_var, service_id_var.set(self.service_id)))
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        for var, token in reversed(self._tokens):
            var.reset(token)
        self._tokens.clear()

    async def __aenter__(self) -> "RequestContextManager":
        return self.__enter__()

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.__exit__(exc_type, exc_val, exc_tb)


def log_request_start(
    logger: structlog.stdlib.BoundLogger,
    method: str,
    path: str,
    client_ip: str | None = None,
) -> None:
    """Log HTTP request start."""
    logger.info(
        "Request started",
        http_method=method,
        http_path=path,
        client_ip=client_ip,
    )


def log_request_end(
    logger: structlog.stdlib.BoundLogger,
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
) -> None:
    """Log HTTP request completion."""
    log_level = "info" if status_code < 400 else "warning" if status_code < 500 else "error"
    getattr(logger, log_level)(
        "Request completed",
        http_method=method,
        http_path=path,
        http_status=status_code,
        duration_ms=round(duration_ms, 2),
    )


def log_external_call_start(
    logger: structlog.stdlib.BoundLogger,
    service: str,
    operation: str,
) -> None:
    """Log start of external service call."""
    logger.debug(
        "External call started",
        external_service=service,
        external_operation=operation,
    )


def log_external_call_end(
    logger: structlog.stdlib.BoundLogger,
    service: str,
    operation: str,
    success: bool,
    duration_ms: float,
    error: str | None = None,
) -> None:
    """Log completion of external service call."""
    log_data = {
        "external_service": service,
        "external_operation": operation,
        "success": success,
        "duration_ms": round(duration_ms, 2),
    }
    if error:
        log_data["error"] = error

    if success:
        logger.debug("External call completed", **log_data)
    else:
        logger.warning("External call failed", **log_data)
