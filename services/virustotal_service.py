# VirusTotal client - URL reports and file submissions (API v2)

import httpx
from typing import Optional
from schemas.scan import ProviderReport
from utils.errors import ProviderError

VIRUSTOTAL_API_URL = "https://www.virustotal.com/vtapi/v2"


class VirusTotalService:
    """Thin request/response client for the VirusTotal public API.

    Each call is a single HTTP exchange; retries are the caller's concern.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = VIRUSTOTAL_API_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def scan_url(self, url: str) -> ProviderReport:
        """Look up the detection report for a URL"""
        async with self._client() as client:
            response = await client.get(
                f"{self.base_url}/url/report",
                params={"apikey": self.api_key, "resource": url}
            )

            if not response.is_success:
                raise ProviderError(response.status_code, f"Failed to scan URL: {response.status_code}")

            return ProviderReport.model_validate(response.json())

    async def scan_file(self, data: bytes, file_name: str) -> ProviderReport:
        """Submit file contents for scanning"""
        async with self._client() as client:
            response = await client.post(
                f"{self.base_url}/file/scan",
                params={"apikey": self.api_key},
                files={"file": (file_name, data)}
            )

            if not response.is_success:
                raise ProviderError(response.status_code, f"Failed to scan file: {response.status_code}")

            return ProviderReport.model_validate(response.json())
