"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class InvalidDirectionError(ValidationError):
    """Raised when a vote direction is not legal for the subject kind."""

    def __init__(self, subject_kind: str, direction: str):
        self.subject_kind = subject_kind
        self.direction = direction
        super().__init__(f"Vote direction '{direction}' is not allowed on {subject_kind}")


class AuthenticationError(DomainError):
    """Raised when credentials cannot be verified."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to touch content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to access {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
