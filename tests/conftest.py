"""Shared fixtures: in-memory MongoDB/GridFS stand-ins and a scripted provider."""
from __future__ import annotations

import asyncio
import itertools
from typing import List, Optional

import pytest
from gridfs.errors import NoFile
from pymongo.errors import PyMongoError

from schemas.scan import ProviderReport
from services.blob_store import BlobStore
from services.result_store import ResultStore
from services.retry import RetryPolicy
from services.scan_workflow import ScanContext, ScanWorkflow
from utils.errors import ProviderError

PUBLIC_BASE_URL = "http://localhost:3000"


class FakeCollection:
    def __init__(self) -> None:
        self.docs: List[dict] = []
        self.fail = False

    async def insert_one(self, doc: dict) -> None:
        if self.fail:
            raise PyMongoError("primary unavailable")
        self.docs.append(doc)


class FakeGridOut:
    def __init__(self, file_id: int, filename: str, data: bytes, metadata: Optional[dict]) -> None:
        self._id = file_id
        self.filename = filename
        self.data = data
        self.metadata = metadata

    async def read(self) -> bytes:
        return self.data


class FakeCursor:
    def __init__(self, items) -> None:
        self._items = list(items)

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for item in self._items:
            yield item


class FakeGridFSBucket:
    def __init__(self) -> None:
        self.files: List[FakeGridOut] = []
        self.uploads = 0
        self.fail = False
        self._ids = itertools.count(1)

    def find(self, query: dict, sort=None) -> FakeCursor:
        # files are kept in upload order, which is uploadDate ascending
        return FakeCursor(f for f in self.files if f.filename == query["filename"])

    async def upload_from_stream(self, filename: str, source: bytes, metadata: Optional[dict] = None) -> int:
        if self.fail:
            raise PyMongoError("bucket unavailable")
        self.uploads += 1
        grid_out = FakeGridOut(next(self._ids), filename, bytes(source), metadata)
        self.files.append(grid_out)
        await asyncio.sleep(0)
        return grid_out._id

    async def delete(self, file_id: int) -> None:
        await asyncio.sleep(0)
        if not any(f._id == file_id for f in self.files):
            raise NoFile(f"no file could be deleted because none matched {file_id}")
        self.files = [f for f in self.files if f._id != file_id]

    async def open_download_stream_by_name(self, filename: str) -> FakeGridOut:
        matches = [f for f in self.files if f.filename == filename]
        if not matches:
            raise NoFile(f"no file in gridfs with filename {filename!r}")
        return matches[-1]


class FakeProvider:
    """Returns ``report`` after failing the first ``failures`` attempts."""

    def __init__(self, report: Optional[ProviderReport] = None, failures: int = 0) -> None:
        self.report = report if report is not None else ProviderReport(positives=0, total=1)
        self.failures = failures
        self.calls: List[tuple] = []

    def _next(self) -> ProviderReport:
        if self.failures:
            self.failures -= 1
            raise ProviderError(503)
        return self.report

    async def scan_url(self, url: str) -> ProviderReport:
        self.calls.append(("url", url))
        return self._next()

    async def scan_file(self, data: bytes, file_name: str) -> ProviderReport:
        self.calls.append(("file", file_name))
        return self._next()


@pytest.fixture
def sleeps() -> List[float]:
    return []


@pytest.fixture
def retry_policy(sleeps) -> RetryPolicy:
    async def record_sleep(delay: float) -> None:
        sleeps.append(delay)

    return RetryPolicy(max_attempts=3, base_delay=1.0, max_delay=8.0, sleep=record_sleep)


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def bucket() -> FakeGridFSBucket:
    return FakeGridFSBucket()


@pytest.fixture
def context(provider, collection, bucket, retry_policy) -> ScanContext:
    return ScanContext(
        provider=provider,
        results=ResultStore(collection),
        blobs=BlobStore(bucket, PUBLIC_BASE_URL),
        retry=retry_policy,
    )


@pytest.fixture
def workflow(context) -> ScanWorkflow:
    return ScanWorkflow(context)
