"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class BadRequestError(DomainError):
    """Malformed client input. Raised before any store access."""

    pass


class StoreUnavailableError(DomainError):
    """The persistent store failed to complete a read or write."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        message = f"Store unavailable during {operation}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
