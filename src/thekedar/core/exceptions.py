class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidNameError(ValidationError):
    pass


class InvalidPhoneError(ValidationError):
    pass


class InvalidAmountError(ValidationError):
    pass


class InvalidDateError(ValidationError):
    pass


class InvalidStatusError(ValidationError):
    pass


class InvalidPaymentTypeError(ValidationError):
    pass


class InvalidProjectError(ValidationError):
    pass


class InvalidLabourError(ValidationError):
    """Raised when a labour reference is unusable, e.g. not assigned to the project."""


class NotFoundError(DomainError):
    """Raised when a record does not exist."""


class AlreadyExistsError(DomainError):
    """Reserved for uniqueness conflicts."""


class AuthenticationError(DomainError):
    """Raised when a passcode or session token cannot be verified."""


class AuthorizationError(DomainError):
    """Raised when a verified user lacks permission for an action."""
