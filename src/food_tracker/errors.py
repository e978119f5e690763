"""Application error types."""


class FoodTrackerError(Exception):
    """Base class for food tracker errors."""


class ValidationError(FoodTrackerError):
    """Raised when user input is rejected before reaching the meal store."""


class NotFoundError(FoodTrackerError):
    """Raised when a referenced catalog food or entry does not exist."""


class StorageWriteError(FoodTrackerError):
    """Raised by storage adapters when a value cannot be written."""
