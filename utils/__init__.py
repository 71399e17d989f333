from utils.errors import (
    ScanError, InvalidInput, FileTooLarge, ProviderError, StoreError, BlobNotFound, ScanFailed
)

__all__ = [
    'ScanError', 'InvalidInput', 'FileTooLarge', 'ProviderError',
    'StoreError', 'BlobNotFound', 'ScanFailed'
]
