"""Shared utilities: logging setup and exception types."""

from .exceptions import (
    HousingDataError,
    ConfigurationError,
    DataValidationError,
    SchemaMismatchError
)
from .logging import configure_logging, get_logger

__all__ = [
    "HousingDataError",
    "ConfigurationError",
    "DataValidationError",
    "SchemaMismatchError",
    "configure_logging",
    "get_logger"
]
