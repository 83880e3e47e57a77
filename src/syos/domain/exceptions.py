"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed input or a violated construction invariant."""


class NotFoundError(DomainException):
    """A referenced product, inventory record or user does not exist."""


class InsufficientQuantityError(DomainException):
    """A reduction exceeds what a location or batch currently holds."""


class InsufficientStockError(InsufficientQuantityError):
    """The demand of a sale or transfer exceeds the available stock."""


class NoAvailableBatchError(DomainException):
    """No non-expired, non-empty batch can supply the requested stock."""


class DuplicateError(DomainException):
    """An entity with the same unique key already exists."""


class AuthenticationError(DomainException):
    """Supplied credentials do not match a registered user."""
