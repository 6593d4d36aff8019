class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when the password does not match the stored credentials."""


class AuthorizationError(DomainError):
    """Raised when an operation needs a signed-in teacher."""


class StorageError(DomainError):
    """Raised when a value cannot be serialized or written to the store."""


class WorkflowError(DomainError):
    """Raised when a class-taking step is called in the wrong state."""
