"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and map them to
user-friendly messages and status codes.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ConcurrentModificationError(DomainException):
    """A record was changed by someone else since it was loaded."""


# --- Authentication -----------------------------------------------------------


class AuthError(DomainException):
    """The caller's identity could not be established."""


class MissingTokenError(AuthError):
    def __init__(self, message: str = "No token, authorization denied") -> None:
        super().__init__(message)


class InvalidTokenError(AuthError):
    def __init__(self, message: str = "Token is not valid") -> None:
        super().__init__(message)


class ExpiredTokenError(AuthError):
    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(message)


class AccessDeniedError(DomainException):
    """The caller is authenticated but lacks the required role."""


class DuplicateEmailError(ValidationError):
    def __init__(self, message: str = "User already exists") -> None:
        super().__init__(message)


class InvalidCredentialsError(ValidationError):
    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


# --- Orders -------------------------------------------------------------------


class OrderError(DomainException):
    """Base class for order ledger failures."""


class EmptyCartError(OrderError):
    def __init__(self, message: str = "Cart is empty") -> None:
        super().__init__(message)


class OrderNotFoundError(OrderError, EntityNotFoundError):
    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order {order_id} not found")
        self.order_id = order_id


class NotOrderOwnerError(OrderError):
    def __init__(self, message: str = "User not authorized") -> None:
        super().__init__(message)


class InvalidOrderStateError(OrderError):
    """The requested transition is not allowed from the current status."""


class PaymentInitError(OrderError):
    """The payment gateway could not allocate a payment session."""
