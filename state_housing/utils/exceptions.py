"""Custom exceptions for state-housing."""


class HousingDataError(Exception):
    """Base exception for the state-housing package."""
    pass


class ConfigurationError(HousingDataError):
    """Raised when configuration cannot be loaded."""
    pass


class DataValidationError(HousingDataError):
    """Raised when input data fails validation."""
    pass


class SchemaMismatchError(DataValidationError):
    """Raised when the wide price table does not have the expected column layout."""

    def __init__(self, message: str, column: str = None):
        super().__init__(message)
        self.column = column
