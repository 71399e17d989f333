# Client configuration routes
from fastapi import APIRouter
from config.settings import get_settings
from schemas.client_config import ClientConfig

router = APIRouter(prefix='/client-config', tags=['Config'])

@router.get('', response_model=ClientConfig)
async def get_client_config():
    """Public backend identifiers for the browser app (never the VirusTotal key)"""
    settings = get_settings()
    return ClientConfig(
        auth_domain=f'{settings.project_id}.firebaseapp.com',
        project_id=settings.project_id,
        storage_bucket=settings.storage_bucket or f'{settings.project_id}.appspot.com',
        messaging_sender_id=settings.messaging_sender_id,
        app_id=settings.app_id,
        measurement_id=settings.measurement_id
    )
