"""API middleware."""

from inventory_costing.api.middleware.error_handler import ErrorHandlerMiddleware
from inventory_costing.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
