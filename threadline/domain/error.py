"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input failed schema validation.

    Carries the per-field messages so callers can render them next to the
    offending inputs.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid input: {fields}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DataAccessError(DomainError):
    """Raised when the database fails underneath a service operation.

    The original exception is kept as ``__cause__`` (``raise ... from``).
    """

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        super().__init__(f"Failed to {operation}: {cause}")
