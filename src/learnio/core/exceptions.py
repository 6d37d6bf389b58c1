"""Custom exceptions for the upload service."""


class UploadException(Exception):
    """Base exception for the upload service."""
    pass


class EntropySourceError(UploadException):
    """Exception raised when random bytes cannot be generated."""
    pass


class StorageWriteError(UploadException):
    """Exception raised when a blob cannot be written to storage."""
    pass


class BlobExistsError(StorageWriteError):
    """Exception raised when a blob with the target name already exists."""
    pass
