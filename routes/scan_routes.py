# Scan routes
from fastapi import APIRouter, Depends, File, UploadFile
from typing import Optional
from config.context import get_scan_workflow
from schemas.scan import UrlScanRequest, FileScan, ScanResult
from services.scan_workflow import ScanWorkflow

router = APIRouter(tags=['Scans'])

@router.post('/scan-url', response_model=ScanResult, response_model_exclude_none=True)
async def scan_url(
    scan_request: UrlScanRequest,
    workflow: ScanWorkflow = Depends(get_scan_workflow)
):
    """Scan a URL and record the detection percentage"""
    return await workflow.submit_url_scan(scan_request.url)

@router.post('/scan-file', response_model=ScanResult, response_model_exclude_none=True)
async def scan_file(
    file: Optional[UploadFile] = File(None),
    workflow: ScanWorkflow = Depends(get_scan_workflow)
):
    """Upload a file to storage, scan it and record the detection percentage"""
    upload = None
    if file is not None and file.filename:
        limit = workflow.context.max_file_size
        if file.size is not None and file.size > limit:
            # Rejected by the workflow on size alone; skip reading the body
            data, size_bytes = b'', file.size
        else:
            data = await file.read(limit + 1)
            size_bytes = len(data)
        upload = FileScan(
            file_name=file.filename,
            mime_type=file.content_type or 'application/octet-stream',
            data=data,
            size_bytes=size_bytes
        )

    return await workflow.submit_file_scan(upload)
