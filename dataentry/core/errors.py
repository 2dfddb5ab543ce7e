"""Error hierarchy shared by the gateway and the controller."""


class DataEntryError(Exception):
    """Base exception for the data entry workflow."""


class InputError(DataEntryError):
    """Raised when the age text cannot be parsed as an integer."""


class StorageError(DataEntryError):
    """Base class for failures reported by the store."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreConnectionError(StorageError):
    """Raised when the store cannot be opened."""


class SchemaError(StorageError):
    """Raised when the people table cannot be created."""


class InsertError(StorageError):
    """Raised when a row could not be appended."""


class QueryError(StorageError):
    """Raised when reading the stored rows failed."""
