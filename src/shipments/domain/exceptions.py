"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field value is out of range or malformed."""


class ParseError(DomainException):
    """A line of the data file could not be split into shipment fields."""


class RangeError(DomainException):
    """An index or a search range is out of bounds."""


class StorageError(DomainException):
    """A data or report file could not be opened, read or written."""


class StoreCapacityError(DomainException):
    """The store's backing slots could not be grown."""
