"""Domain layer errors.

Every error carries a stable ``code`` which the interface layer exposes to
clients alongside the human-readable message.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "domain_error"


class ValidationError(DomainError):
    """Input failed validation (empty content, malformed identifier)."""

    code = "validation_error"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvariantViolationError(DomainError):
    """Raised when a write would break the comment thread structure."""

    code = "invariant_violation"


class ForbiddenError(DomainError):
    """Raised when the acting principal may not modify a resource."""

    code = "forbidden"

    def __init__(self, message: str = "only the owner may modify this resource"):
        super().__init__(message)


class DependencyError(DomainError):
    """Raised when a collaborator outside the comment engine fails."""

    code = "dependency_error"
