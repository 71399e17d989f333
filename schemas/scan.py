# Scan schemas
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime, timezone

class UrlScanRequest(BaseModel):
    url: Optional[str] = None

class FileScan(BaseModel):
    """An uploaded file held in memory; the bytes are never parsed"""
    file_name: str
    mime_type: str = 'application/octet-stream'
    data: bytes
    size_bytes: int

class ProviderReport(BaseModel):
    model_config = ConfigDict(extra='ignore')

    positives: Optional[int] = None
    total: Optional[int] = None

class ScanResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    combined_result: float = Field(..., alias='combinedResult')  # 0-100
    file_url: Optional[str] = Field(default=None, alias='fileUrl')

class ScanRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = None
    file_name: Optional[str] = Field(default=None, alias='fileName')
    combined_result: float = Field(..., alias='combinedResult')
    file_url: Optional[str] = Field(default=None, alias='fileUrl')
    scanned_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), alias='scannedAt')
