"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Empty or malformed input, rejected before any network call."""

    pass


class AuthError(DomainError):
    """Raised when there is no viewer session or the viewer does not own the item."""

    pass


class NotAuthorizedError(AuthError):
    """Raised when a viewer attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to edit {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")


class LikeInFlightError(DomainError):
    """Raised when a like toggle is requested while one is pending for the same item."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"A like change for item {item_id} is still in progress")
