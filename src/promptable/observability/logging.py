"""
promptable.observability.logging

Structured logging configuration for the component host.

Responsibilities:
- Route stdlib logging and structlog through one JSON renderer.
- Hand out bound loggers per module.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(*, service_name: str, level: str) -> None:
    """
    Configure process-wide logging. Safe to call once per `create_app`; later calls
    replace the structlog configuration and leave stdlib handlers untouched.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            # request_id / component_id bound by middleware and routers.
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _static_fields({"service": service_name}),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _static_fields(fields: dict[str, Any]):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for key, value in fields.items():
            event_dict.setdefault(key, value)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Prompt lifecycle events (prompt_opened, prompt_confirmed, prompt_cancelled,
# prompt_action_unresolved, action_halted) are all emitted through `get_logger`.
