# Backend configuration settings
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from functools import lru_cache
import os

load_dotenv()

class Settings(BaseSettings):
    # VirusTotal
    api_key: str = os.environ.get('API_KEY', '')
    virustotal_api_url: str = os.environ.get('VIRUSTOTAL_API_URL', 'https://www.virustotal.com/vtapi/v2')

    # Provider retry policy (3 attempts total = 1 initial + 2 retries)
    provider_max_attempts: int = int(os.environ.get('PROVIDER_MAX_ATTEMPTS', 3))
    provider_retry_base_delay: float = float(os.environ.get('PROVIDER_RETRY_BASE_DELAY', 1.0))
    provider_retry_max_delay: float = float(os.environ.get('PROVIDER_RETRY_MAX_DELAY', 8.0))
    provider_timeout: float = float(os.environ.get('PROVIDER_TIMEOUT', 30.0))  # per attempt, seconds

    # Max file size (32MB) for the VirusTotal free API
    max_file_size: int = int(os.environ.get('MAX_FILE_SIZE', 32 * 1024 * 1024))

    # MongoDB
    mongo_url: str = os.environ.get('MONGO_URL', 'mongodb://localhost:27017')
    db_name: str = os.environ.get('DB_NAME', 'safescanx')
    scans_collection: str = os.environ.get('SCANS_COLLECTION', 'scans')

    # Managed backend identifiers (passed through to the browser)
    project_id: str = os.environ.get('PROJECT_ID', '')
    storage_bucket: str = os.environ.get('STORAGE_BUCKET', '')
    messaging_sender_id: str = os.environ.get('MESSAGING_SENDER_ID', '')
    app_id: str = os.environ.get('APP_ID', '')
    measurement_id: str = os.environ.get('MEASUREMENT_ID', '')
    service_account_path: str = os.environ.get('SERVICE_ACCOUNT_PATH', '')

    # GridFS bucket holding uploaded files (a MongoDB collection prefix)
    gridfs_bucket: str = os.environ.get('GRIDFS_BUCKET', 'uploads')

    # CORS
    cors_origins: str = os.environ.get('CORS_ORIGINS', '*')

    # Base URL used to build fetch links for uploaded files
    public_base_url: str = os.environ.get('PUBLIC_BASE_URL', 'http://localhost:3000')

    # Single-page app entry directory
    static_dir: str = os.environ.get('STATIC_DIR', 'static')

    class Config:
        env_file = '.env'
        case_sensitive = False
        extra = 'ignore'  # Allow extra fields from .env

@lru_cache()
def get_settings() -> Settings:
    return Settings()
