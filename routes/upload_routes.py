# Uploaded file download routes
from fastapi import APIRouter, Depends, Response
from config.context import get_scan_context
from services.blob_store import upload_path
from services.scan_workflow import ScanContext

router = APIRouter(prefix='/uploads', tags=['Uploads'])

@router.get('/{file_name:path}')
async def download_upload(
    file_name: str,
    context: ScanContext = Depends(get_scan_context)
):
    """Serve a previously uploaded file"""
    data, content_type = await context.blobs.get(upload_path(file_name))
    return Response(content=data, media_type=content_type)
