# Scan error taxonomy
from typing import Optional


class ScanError(Exception):
    """Base class for errors that map onto an HTTP error response"""
    status_code: int = 500
    default_message: str = 'Internal server error'

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ScanError):
    """A required field is missing or empty"""
    status_code = 400
    default_message = 'Invalid input'


class FileTooLarge(ScanError):
    status_code = 400
    default_message = 'File is too large to scan. Max file size is 32MB.'


class ProviderError(ScanError):
    """The scan provider answered with a non-success status"""
    status_code = 502
    default_message = 'Scan provider request failed'

    def __init__(self, status: int, message: Optional[str] = None):
        self.status = status
        super().__init__(message or f'{self.default_message}: {status}')


class StoreError(ScanError):
    """Database or blob storage backend failure"""
    default_message = 'Storage backend failure'


class BlobNotFound(StoreError):
    status_code = 404
    default_message = 'File not found'


class ScanFailed(ScanError):
    """Generic failure surfaced to the caller once retries are exhausted"""
    default_message = 'Error scanning item'
