from typing import Dict, List, Optional


class MarketplaceError(Exception):
    """Base exception for marketplace rule violations."""

    status_code = 400
    error_code = "ERROR"
    default_message = "Request could not be processed"

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[Dict[str, List[str]]] = None,
    ):
        self.message = message or self.default_message
        self.errors = errors or {}
        super().__init__(self.message)


class Unauthenticated(MarketplaceError):
    """Raised when no valid caller identity is presented."""

    status_code = 401
    error_code = "UNAUTHENTICATED"
    default_message = "Authentication required"


class IdentityNotFound(Unauthenticated):
    """Raised when a valid token references a user that no longer exists."""


class InvalidCredentials(Unauthenticated):
    default_message = "Invalid email or password"


class Forbidden(MarketplaceError):
    """Raised when the caller is authenticated but not allowed to act on the target."""

    status_code = 403
    error_code = "FORBIDDEN"
    default_message = "You are not allowed to perform this action"


class NotFound(MarketplaceError):
    status_code = 404
    error_code = "NOT_FOUND"
    default_message = "Resource not found"


class ConsultantNotFound(NotFound):
    default_message = "Consultant not found"


class InquiryNotFound(NotFound):
    default_message = "Inquiry not found"


class IllegalTransition(MarketplaceError):
    """Raised when the requested status cannot be reached from the current one."""

    status_code = 409
    error_code = "ILLEGAL_TRANSITION"
    default_message = "Inquiry status cannot be changed now"


class InvalidStatus(MarketplaceError):
    error_code = "INVALID_STATUS"
    default_message = "Invalid status"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, errors={"status": [message or self.default_message]})


class InvalidMode(MarketplaceError):
    error_code = "INVALID_MODE"
    default_message = "Mode must be one of: remote, hybrid, onsite"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, errors={"mode": [message or self.default_message]})


class EmptyMessage(MarketplaceError):
    error_code = "EMPTY_MESSAGE"
    default_message = "Message cannot be empty"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, errors={"message": [message or self.default_message]})


class DuplicateAccount(MarketplaceError):
    status_code = 409
    error_code = "DUPLICATE_ACCOUNT"
    default_message = "User already exists with this email"


class DependencyFailure(MarketplaceError):
    """Raised when the persistence layer fails underneath a write."""

    status_code = 500
    error_code = "DEPENDENCY_FAILURE"
    default_message = "The operation could not be completed. Please try again later."


class SignupFailed(DependencyFailure):
    error_code = "SIGNUP_FAILED"
    default_message = "Account could not be created. Please try again later."


class MissingField(MarketplaceError):
    error_code = "MISSING_FIELD"
    default_message = "Required field is missing"

    def __init__(self, field: str):
        message = f"{field} is required"
        super().__init__(message, errors={field: [message]})


class InvalidVerifiedFlag(MarketplaceError):
    error_code = "INVALID_VERIFIED_FLAG"
    default_message = "verified must be true or false"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, errors={"verified": [message or self.default_message]})
