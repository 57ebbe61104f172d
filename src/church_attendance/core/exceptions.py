class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid.

    Unknown username and wrong password raise the same message.
    """


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when an update or lookup targets a missing id."""


class InvalidReferenceError(DomainError):
    """Raised when a record points at a member or event that does not exist."""


class TransientUnavailableError(DomainError):
    """Raised when the API cannot be reached and no fallback is configured."""


class ServerFaultError(DomainError):
    """Raised for unexpected storage/server errors reported by the API."""
