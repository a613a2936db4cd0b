"""Structlog setup for the identity service.

Development terminals get colored key/value output; everything else gets
one JSON object per line. Credential-bearing keys are masked before any
renderer sees them.
"""

import logging
import os
import sys
from typing import Any

import structlog

REDACTED = "[REDACTED]"
SENSITIVE_KEYS = frozenset({"password", "hashed_password", "token", "secret_key"})


def redact_sensitive_keys(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Mask values of credential-bearing keys in a log event."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def _wants_console() -> bool:
    # FORCE_COLOR=1 keeps colored output in non-TTY containers
    if os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes"):
        return True
    return sys.stdout.isatty()


def configure_logging(level: str = "INFO") -> None:
    """Install the structlog processor chain.

    Args:
        level: Minimum level name; events below it are dropped
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_keys,
    ]
    if _wants_console():
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
