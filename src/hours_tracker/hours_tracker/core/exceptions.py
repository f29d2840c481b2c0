class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class InvariantError(DomainError):
    """Raised when an operation would break a system-wide invariant.

    The refusal has already been written to the history log as an "Error" entry.
    """


class GuardedDeleteError(InvariantError):
    """Raised when a delete is refused because other records still reference the target."""


class PersistenceError(DomainError):
    """Raised when the persistence backend fails; in-memory state is left unchanged."""
