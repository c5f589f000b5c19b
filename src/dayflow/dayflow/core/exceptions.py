class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidRange(ValidationError):
    """Raised when a date range starts after it ends."""


class InvalidStatus(ValidationError):
    """Raised when a status value is not allowed for the operation."""


class RequestValidationError(ValidationError):
    """Raised when a request body fails schema validation.

    Carries one entry per offending field so the HTTP layer can return them all.
    """

    def __init__(self, errors: list[dict]):
        super().__init__("Invalid request body")
        self.errors = errors


class AuthenticationError(DomainError):
    """Raised when credentials or identity cannot be verified."""

    status_code = 401


class InvalidCredentials(AuthenticationError):
    """Same error for unknown email and wrong password."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    status_code = 403


class NotFoundError(DomainError):
    status_code = 404


class ConflictError(DomainError):
    """Raised when an operation collides with existing state."""

    status_code = 409


class AlreadyCheckedIn(ConflictError):
    def __init__(self, message: str = "Already checked in today"):
        super().__init__(message)


class AlreadyCheckedOut(ConflictError):
    def __init__(self, message: str = "Already checked out today"):
        super().__init__(message)


class NotCheckedIn(ConflictError):
    def __init__(self, message: str = "Please check in first"):
        super().__init__(message)
