"""
Application exceptions.
"""


class DaylioError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DaylioError):
    """Raised when caller input is missing or malformed."""

    status_code = 400


class StorageError(DaylioError):
    """Raised when the underlying store rejects or fails an operation."""

    status_code = 500


class BackupImportError(DaylioError):
    """Raised when a backup file cannot be decoded or does not match the backup format."""

    status_code = 400
