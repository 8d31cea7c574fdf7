"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or a business rule was violated."""


class NotFoundError(DomainException):
    """A referenced product, order or color does not exist."""


class StoreError(DomainException):
    """The underlying store could not be read or written.

    Treated as transient: the caller may retry the whole request.
    """
