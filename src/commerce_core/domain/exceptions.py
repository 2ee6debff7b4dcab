"""Domain exceptions for commerce-core.

Exception hierarchy:
    DomainException (base)
    ├── Validation Errors (invalid argument)
    │   └── InvalidArgumentError
    │       ├── InvalidIdentifierError
    │       ├── InvalidMoneyError
    │       ├── CurrencyMismatchError
    │       ├── InvalidEmailError
    │       ├── InvalidPhoneNumberError
    │       ├── InvalidOrderItemError
    │       ├── InvalidOrderError
    │       ├── InvalidPaymentError
    │       └── InvalidMemberError
    ├── State & Transition Errors (illegal state)
    │   └── InvalidStateTransitionError
    ├── Not Found Errors
    │   ├── MemberNotFoundError
    │   ├── OrderNotFoundError
    │   └── PaymentNotFoundError
    └── Conflict Errors
        ├── MemberAlreadyExistsError
        ├── PaymentAlreadyExistsError
        └── PaymentMethodNotSupportedError

Every exception carries a stable ``code`` so that an outer layer can map it
without inspecting messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """

    code = "SYSTEM_001"


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidArgumentError(DomainException):
    """Raised when a supplied value violates a structural invariant.

    Covers null, blank, negative, malformed and wrong-currency input.
    Always raised fail-fast at construction or on the mutating call.
    """

    code = "VALIDATION_001"


class InvalidIdentifierError(InvalidArgumentError):
    """Raised when an entity identifier is not a valid UUID."""

    code = "VALIDATION_003"


class InvalidMoneyError(InvalidArgumentError):
    """Raised for a null/negative amount, unknown currency or bad factor."""

    code = "VALIDATION_003"


class CurrencyMismatchError(InvalidMoneyError):
    """Raised when two Money values with different currencies are combined."""

    code = "VALIDATION_004"


class InvalidEmailError(InvalidArgumentError):
    code = "MEMBER_003"


class InvalidPhoneNumberError(InvalidArgumentError):
    code = "MEMBER_004"


class InvalidOrderItemError(InvalidArgumentError):
    code = "ORDER_006"


class InvalidOrderError(InvalidArgumentError):
    code = "VALIDATION_004"


class InvalidPaymentError(InvalidArgumentError):
    code = "VALIDATION_004"


class InvalidMemberError(InvalidArgumentError):
    code = "VALIDATION_004"


# =============================================================================
# State & Transition Errors
# =============================================================================


class InvalidStateTransitionError(DomainException):
    """Raised when a lifecycle transition is not permitted from the current state.

    Order:
        - pending → confirmed (confirm)
        - confirmed → completed (complete)
        - pending | confirmed → cancelled (cancel)
        - cancelled and completed are terminal

    Payment:
        - completed → refunded (refund); refunding twice is a no-op
        - process() and fail() apply no state guard at the entity level
    """

    code = "STATE_001"


# =============================================================================
# Not Found Errors
# =============================================================================


class MemberNotFoundError(DomainException):
    code = "MEMBER_001"


class OrderNotFoundError(DomainException):
    code = "ORDER_001"


class PaymentNotFoundError(DomainException):
    code = "PAYMENT_001"


# =============================================================================
# Conflict Errors
# =============================================================================


class MemberAlreadyExistsError(DomainException):
    """Raised when registering a member whose e-mail is already taken."""

    code = "MEMBER_002"


class PaymentAlreadyExistsError(DomainException):
    """Raised when creating a second payment for the same order."""

    code = "PAYMENT_002"


class PaymentMethodNotSupportedError(DomainException):
    """Raised when a payment method cannot be used for the order amount.

    Credit cards have a minimum amount; bank transfers have a maximum.
    """

    code = "PAYMENT_006"
