"""Request logging and error translation for the API."""

from src.api.middleware.error_handler import ErrorHandlerMiddleware, setup_exception_handlers
from src.api.middleware.logging import LoggingMiddleware

__all__ = ["ErrorHandlerMiddleware", "LoggingMiddleware", "setup_exception_handlers"]
