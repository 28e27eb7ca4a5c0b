"""
Planetas custom exceptions

All application errors inherit from PlanetasError.
"""

from typing import Optional


class PlanetasError(Exception):
    """Base application error"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(PlanetasError):
    """
    User input rejected by the form validation gate.

    Raised before any storage call is made.

    Attributes:
        field: name of the offending form field
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        if self.field:
            return f"[{self.field}] {self.message}"
        return self.message


class StorageError(PlanetasError):
    """
    Storage failure

    The database could not be opened, read or written.

    Attributes:
        operation: storage operation that failed (open, insert, ...)
        original_error: underlying exception, if any
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.operation = operation
        self.original_error = original_error
        super().__init__(message)

    def __str__(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message
