"""Account domain exceptions.

Errors raised by the account store and the onboarding policy around it.
"""

from winning.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ValidationError,
)


class NotAuthenticatedError(AuthenticationError):
    """Raised when an operation needs a current account and there is none."""

    error_type = "not_authenticated"

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class UnknownEmailError(AuthenticationError):
    """Raised by the HTTP layer when login finds no account for an email."""

    error_type = "invalid_credentials"

    def __init__(self, message: str = "No account registered with this email"):
        super().__init__(message)


class EmailExistsError(ConflictError):
    """Raised when attempting to sign up with an existing email."""

    error_type = "email_exists"

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message)


class InvalidTransitionError(ConflictError):
    """Raised when an admin action is not allowed from the account's status."""

    error_type = "invalid_transition"

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move account from {current} to {target}")


class AdminRequiredError(AuthorizationError):
    """Raised when a non-admin account calls an admin operation."""

    error_type = "admin_required"

    def __init__(self, message: str = "Admin privileges required"):
        super().__init__(message)


class AccountNotModerableError(AuthorizationError):
    """Raised when an admin action targets an admin account."""

    error_type = "account_not_moderable"

    def __init__(self, message: str = "Admin accounts cannot be moderated"):
        super().__init__(message)


class AccountNotActiveError(AuthorizationError):
    """Raised when an operation needs an approved account."""

    error_type = "account_not_active"

    def __init__(self, message: str = "Account is not active"):
        super().__init__(message)


class PlanRequiredError(ValidationError):
    """Raised when a contact number is submitted before choosing a plan."""

    error_type = "plan_required"

    def __init__(self, message: str = "Choose a subscription plan first"):
        super().__init__(message)


class PlanAlreadySetError(ValidationError):
    error_type = "plan_already_set"

    def __init__(self, message: str = "Subscription plan is already chosen"):
        super().__init__(message)


class UnknownPlanError(ValidationError):
    error_type = "unknown_plan"

    def __init__(self, plan: str):
        super().__init__(f"Unknown subscription plan: {plan}")


class InvalidContactNumberError(ValidationError):
    """Raised when the WhatsApp number is not an Algerian mobile number."""

    error_type = "invalid_contact_number"

    def __init__(
        self,
        message: str = "Enter a valid Algerian WhatsApp number (e.g. +213555001122)",
    ):
        super().__init__(message)


class ContactAlreadySubmittedError(ConflictError):
    """Raised when a contact number is submitted after onboarding finished.

    Only a ``new`` account without a number may submit one; later status
    changes belong to admins.
    """

    error_type = "contact_already_submitted"

    def __init__(self, message: str = "Contact number already submitted"):
        super().__init__(message)
