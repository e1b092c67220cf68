"""
Custom exceptions for the application.
"""


class SentencePracticeException(Exception):
    """Base exception for all application exceptions."""
    pass


class ValidationError(SentencePracticeException):
    """Raised when validation fails."""
    pass


class AuthenticationError(SentencePracticeException):
    """Raised when no user identity can be resolved for the request."""
    pass
