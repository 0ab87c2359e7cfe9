"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Caller passed a value the engine cannot work with (n < 0, bad cycle day, ...)"""

    pass


class InvalidRecurrenceError(InvalidInputError):
    """Recurrence descriptor is malformed (due day outside 1..31, negative lead days)"""

    pass


class InvalidTransactionDataError(InvalidInputError):
    """Transaction data is malformed or invalid"""

    pass


class StorageError(DomainException):
    """Storage collaborator failed to return a snapshot"""

    pass
