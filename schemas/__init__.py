from schemas.scan import UrlScanRequest, FileScan, ProviderReport, ScanResult, ScanRecord
from schemas.client_config import ClientConfig

__all__ = [
    'UrlScanRequest', 'FileScan', 'ProviderReport', 'ScanResult', 'ScanRecord',
    'ClientConfig'
]
