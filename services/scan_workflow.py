# Scan workflow - validate, upload, scan with retry, normalize, persist
import logging
from dataclasses import dataclass
from typing import Optional
from schemas.scan import FileScan, ProviderReport, ScanRecord, ScanResult
from services.blob_store import BlobStore, upload_path
from services.result_store import ResultStore
from services.retry import RetryPolicy
from services.virustotal_service import VirusTotalService
from utils.errors import FileTooLarge, InvalidInput, ScanFailed

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 32 * 1024 * 1024


@dataclass
class ScanContext:
    """Long-lived collaborators shared by every request"""
    provider: VirusTotalService
    results: ResultStore
    blobs: BlobStore
    retry: RetryPolicy
    max_file_size: int = MAX_FILE_SIZE


def normalize_report(report: ProviderReport) -> ProviderReport:
    """Fill in missing counts so the ratio is always defined"""
    positives = report.positives or 0
    total = report.total or 1
    return ProviderReport(positives=positives, total=total)


def combined_result(report: ProviderReport) -> float:
    """Percentage of engines that flagged the item, clamped to 0-100"""
    report = normalize_report(report)
    percentage = report.positives / report.total * 100
    return max(0.0, min(100.0, percentage))


class ScanWorkflow:
    def __init__(self, context: ScanContext):
        self.context = context

    async def submit_url_scan(self, url: Optional[str]) -> ScanResult:
        if not url or not url.strip():
            raise InvalidInput('URL is required')

        try:
            report = await self.context.retry.run(
                lambda: self.context.provider.scan_url(url),
                description=f'VirusTotal URL scan for {url}'
            )
            result = ScanResult(combined_result=combined_result(report))

            await self.context.results.append(ScanRecord(
                url=url,
                combined_result=result.combined_result
            ))
        except Exception as e:
            logger.exception(f'Error scanning URL {url}: {e}')
            raise ScanFailed('Error scanning URL') from e

        logger.info(f'Scanned URL {url}: {result.combined_result:.1f}% detected')
        return result

    async def submit_file_scan(self, file: Optional[FileScan]) -> ScanResult:
        if file is None:
            raise InvalidInput('File is required')

        if file.size_bytes > self.context.max_file_size:
            raise FileTooLarge()

        try:
            # Stays in storage even if the scan below fails
            file_url = await self.context.blobs.put(
                upload_path(file.file_name),
                file.data,
                file.mime_type
            )

            report = await self.context.retry.run(
                lambda: self.context.provider.scan_file(file.data, file.file_name),
                description=f'VirusTotal file scan for {file.file_name}'
            )
            result = ScanResult(combined_result=combined_result(report), file_url=file_url)

            await self.context.results.append(ScanRecord(
                file_name=file.file_name,
                combined_result=result.combined_result,
                file_url=file_url
            ))
        except Exception as e:
            logger.exception(f'Error scanning file {file.file_name}: {e}')
            raise ScanFailed('Error scanning file or uploading to storage') from e

        logger.info(f'Scanned file {file.file_name}: {result.combined_result:.1f}% detected')
        return result
