"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class PriceSourceError(AppError):
    """
    Raised inside a price source when an upstream response is unusable.

    Never escapes a provider: sources catch it and report the price as absent.
    """

    def __init__(self, instrument_id: str, reason: str):
        super().__init__(
            f"Price lookup failed for {instrument_id}: {reason}",
            code="PRICE_SOURCE_ERROR",
        )
