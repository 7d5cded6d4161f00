class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidKeyError(ValidationError):
    """Raised when a record key is not a well-formed integer identifier."""


class NotFoundError(DomainError):
    """Raised when no record exists for the given key."""


class StorageError(DomainError):
    """Raised when the data file cannot be read or written during a mutation."""


class MalformedLineError(DomainError):
    """Raised by the codec when a line cannot be decoded.

    Repositories swallow it: a corrupt line is simply left out of read results.
    """
