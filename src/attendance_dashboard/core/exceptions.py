class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a local precondition fails, before any backend call."""


class AuthenticationError(DomainError):
    """Raised when the hosted sign-in or code exchange fails."""


class BackendError(DomainError):
    """Raised for any failure reported by the managed backend."""


class FetchError(BackendError):
    """Raised when a read query fails."""


class SchemaError(BackendError):
    """Raised when a backend row does not have the expected shape."""
