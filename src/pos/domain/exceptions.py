"""Domain-level exceptions.

Business rule violations are subclasses of DomainException so the HTTP
gateway and the CLI can catch them uniformly.  StorageError sits outside
that hierarchy: it reports an I/O failure, not a rule violation.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was missing, malformed, or broke an invariant."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(Exception):
    """The record store could not be read or written."""
