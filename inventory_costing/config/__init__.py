"""Configuration module."""

from inventory_costing.config.logging import (
    bound_receipt_context,
    configure_logging,
    get_logger,
)
from inventory_costing.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "bound_receipt_context",
    "get_logger",
]
