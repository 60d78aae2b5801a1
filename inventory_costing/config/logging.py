"""
Structured logging for the costing engine, built on structlog.

Receipt processing binds the purchase order and receipt ids into the
contextvars for the duration of a receipt, so every event emitted by the
processor and the stores carries them. Monetary floats are rounded before
rendering. Development renders to a colored console, other environments to JSON.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from inventory_costing.config.settings import get_settings

# Event keys holding costs or prices
MONEY_FIELDS = frozenset(
    {
        "unit_cost",
        "previous_unit_cost",
        "cost",
        "total_cost",
        "total_variance",
        "variance",
    }
)

QUIET_LOGGERS = ("aiosqlite", "uvicorn.access")


def add_service_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Stamp service name, version and environment on every event."""
    settings = get_settings()
    event_dict.setdefault("service", settings.app_name)
    event_dict.setdefault("version", settings.app_version)
    event_dict.setdefault("environment", settings.environment)
    return event_dict


def round_money_fields(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Round monetary floats to two digits past the configured cost precision."""
    digits = get_settings().costing.cost_decimals + 2
    for key in MONEY_FIELDS.intersection(event_dict):
        value = event_dict[key]
        if isinstance(value, float):
            event_dict[key] = round(value, digits)
    return event_dict


def build_processors(json_output: bool) -> list[Processor]:
    """Processor chain shared by the console and JSON renderers."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        add_service_context,
        round_money_fields,
    ]
    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    return processors


def configure_logging(json_output: bool | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        json_output: Force JSON (True) or console (False) rendering;
            defaults to console in development only
    """
    settings = get_settings()
    if json_output is None:
        json_output = settings.environment != "development"

    structlog.configure(
        processors=build_processors(json_output),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@contextmanager
def bound_receipt_context(
    purchase_order_id: str, receipt_id: str | None = None
) -> Iterator[None]:
    """Bind order and receipt ids to every event logged inside the block."""
    context = {"purchase_order_id": purchase_order_id}
    if receipt_id is not None:
        context["receipt_id"] = receipt_id
    with structlog.contextvars.bound_contextvars(**context):
        yield


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
