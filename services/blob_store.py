# Blob store - uploaded file bytes kept in a GridFS bucket
import logging
from typing import Tuple
from urllib.parse import quote
from gridfs.errors import NoFile
from pymongo import ASCENDING
from pymongo.errors import PyMongoError
from utils.errors import BlobNotFound, StoreError

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = 'application/octet-stream'


def upload_path(file_name: str) -> str:
    return f'uploads/{file_name}'


class BlobStore:
    """Path-keyed byte storage.

    Writing to a path that already holds a blob replaces it: the new revision
    is stored first, then revisions uploaded before it under the same name
    are removed.
    """

    def __init__(self, bucket, public_base_url: str):
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip('/')

    def public_url(self, path: str) -> str:
        return f'{self.public_base_url}/{quote(path)}'

    async def put(self, path: str, data: bytes, content_type: str) -> str:
        try:
            file_id = await self.bucket.upload_from_stream(
                path,
                data,
                metadata={'contentType': content_type or DEFAULT_CONTENT_TYPE}
            )
            revisions = [
                grid_out._id async for grid_out in
                self.bucket.find({'filename': path}, sort=[('uploadDate', ASCENDING)])
            ]
            # Only revisions older than ours; a newer concurrent write owns the rest
            stale = revisions[:revisions.index(file_id)] if file_id in revisions else []
            for stale_id in stale:
                try:
                    await self.bucket.delete(stale_id)
                except NoFile:
                    pass  # already removed by a concurrent writer
        except PyMongoError as e:
            raise StoreError(f'Failed to upload {path}: {e}') from e

        if stale:
            logger.info(f'Overwrote {len(stale)} earlier revision(s) of {path}')
        return self.public_url(path)

    async def get(self, path: str) -> Tuple[bytes, str]:
        """Return the stored bytes and content type for ``path``"""
        try:
            grid_out = await self.bucket.open_download_stream_by_name(path)
            data = await grid_out.read()
        except NoFile as e:
            raise BlobNotFound() from e
        except PyMongoError as e:
            raise StoreError(f'Failed to read {path}: {e}') from e

        metadata = grid_out.metadata or {}
        return data, metadata.get('contentType', DEFAULT_CONTENT_TYPE)
