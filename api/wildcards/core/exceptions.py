"""
Custom exceptions for the application.
"""


class WildcardsException(Exception):
    """Base exception for all Wildcards application exceptions."""
    pass


class ValidationError(WildcardsException):
    """Raised when a request is missing required fields or carries invalid data."""
    pass


class NotFoundError(WildcardsException):
    """Raised when a requested resource is not found."""
    pass


class ConflictError(WildcardsException):
    """Raised when there's a conflict (e.g., an animal already bound to another card)."""
    pass


class StorageError(WildcardsException):
    """Raised when the database fails for any reason not classified above.

    The message is always generic; engine details are only logged.
    """
    pass
