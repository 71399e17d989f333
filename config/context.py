# Per-process scan context, built once at startup and injected into handlers
from fastapi import Request
import logging
from config.database import Database
from config.settings import Settings
from services.blob_store import BlobStore
from services.result_store import ResultStore
from services.retry import RetryPolicy
from services.scan_workflow import ScanContext, ScanWorkflow
from services.virustotal_service import VirusTotalService

logger = logging.getLogger(__name__)

def build_scan_context(settings: Settings) -> ScanContext:
    """Wire the scan collaborators to the connected database"""
    if not settings.api_key:
        logger.warning("VirusTotal API key not configured")

    return ScanContext(
        provider=VirusTotalService(
            api_key=settings.api_key,
            base_url=settings.virustotal_api_url,
            timeout=settings.provider_timeout
        ),
        results=ResultStore(Database.get_db()[settings.scans_collection]),
        blobs=BlobStore(Database.get_bucket(), settings.public_base_url),
        retry=RetryPolicy(
            max_attempts=settings.provider_max_attempts,
            base_delay=settings.provider_retry_base_delay,
            max_delay=settings.provider_retry_max_delay
        ),
        max_file_size=settings.max_file_size
    )

def get_scan_context(request: Request) -> ScanContext:
    return request.app.state.scan_context

def get_scan_workflow(request: Request) -> ScanWorkflow:
    return ScanWorkflow(get_scan_context(request))
