# appseed/errors.py


class StorageError(Exception):
    """The backing store could not commit or serve a record."""


class RecordValidationError(StorageError):
    """The payload was rejected before reaching the backing store."""
