"""Domain-level exceptions.

Every failure a demo can report is a subclass of DomainException so the
managers and the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A stock quantity was negative."""


class InsufficientFundsError(ValidationError):
    """A transaction amount exceeds the account balance."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateKeyError(DomainException):
    """An entity with the same id is already stored."""


class RecordFormatError(DomainException):
    """A line of a student records file could not be parsed."""


class MissingFieldError(RecordFormatError):
    """A record line has fewer fields than required."""


class InvalidFormatError(RecordFormatError):
    """A record field does not hold a value of the expected type."""
