"""Error taxonomy shared by the upsert and dispatch services."""


class CalorieTrackerError(Exception):
    """Base class for application errors."""


class ValidationError(CalorieTrackerError):
    """Raised when an input record or message is malformed."""


class StoreUnavailable(CalorieTrackerError):
    """Raised when the document store rejects or cannot take a write."""

    def __init__(self, food_id: str, cause: BaseException) -> None:
        super().__init__(f"Store write failed for {food_id!r}: {cause}")
        self.food_id = food_id
        self.cause = cause


class DispatchError(CalorieTrackerError):
    """Raised when the push provider fails to accept a notification."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.cause = cause


class InitializationError(CalorieTrackerError):
    """Raised when clients or configuration cannot be set up."""
