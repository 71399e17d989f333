from services.retry import RetryPolicy
from services.virustotal_service import VirusTotalService
from services.result_store import ResultStore
from services.blob_store import BlobStore
from services.scan_workflow import ScanContext, ScanWorkflow

__all__ = [
    'RetryPolicy',
    'VirusTotalService',
    'ResultStore',
    'BlobStore',
    'ScanContext', 'ScanWorkflow'
]
