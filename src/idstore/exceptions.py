"""Identity store exceptions.

These exceptions are raised by the idstore package before any database
work happens. Failures coming from the database itself (connectivity,
constraint violations) are SQLAlchemy exceptions and are not wrapped.
"""


class StoreError(Exception):
    """Base exception for all identity store errors."""

    def __init__(self, message: str = "Identity store error"):
        self.message = message
        super().__init__(self.message)


class InvalidArgumentError(StoreError, ValueError):
    """Raised when a required entity is None or a required string is empty."""

    def __init__(self, argument_name: str, message: str | None = None):
        self.argument_name = argument_name
        super().__init__(message or f"Argument must not be empty: {argument_name}")


class InvalidOperationError(StoreError):
    """Raised when an operation cannot be carried out in the current state."""

    def __init__(self, message: str = "Invalid operation"):
        super().__init__(message)


class StoreDisposedError(InvalidOperationError):
    """Raised when a store is used after dispose()."""

    def __init__(self, store_name: str):
        self.store_name = store_name
        super().__init__(f"{store_name} has been disposed")
