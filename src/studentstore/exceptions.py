class StudentStoreError(Exception):
    """Base class for exceptions in this module."""


class EncodeError(StudentStoreError):
    """Raised when a student cannot be serialized."""


class DecodeError(StudentStoreError):
    """
    Raised when bytes are not a valid serialized student.

    `fields` lists the offending field locations, if any could be determined.
    """

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


class NotFoundError(StudentStoreError):
    """Raised when a key is not present in the store."""


class InvalidKeyError(StudentStoreError):
    """Raised when a key cannot be used as a file name."""


class SaveError(StudentStoreError):
    """Raised when a student fails to save."""


class LoadError(StudentStoreError):
    """Raised when a student file exists but fails to load."""


class StoreInitError(StudentStoreError):
    """Raised when the store directory cannot be created."""
