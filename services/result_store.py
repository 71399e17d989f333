# Result store - append-only scan history
import logging
from pymongo.errors import PyMongoError
from schemas.scan import ScanRecord
from utils.errors import StoreError

logger = logging.getLogger(__name__)


class ResultStore:
    """Appends one document per completed scan; records are never updated"""

    def __init__(self, collection):
        self.collection = collection

    async def append(self, record: ScanRecord) -> None:
        doc = record.model_dump(by_alias=True, exclude_none=True)
        try:
            await self.collection.insert_one(doc)
        except PyMongoError as e:
            raise StoreError(f'Failed to save scan record: {e}') from e
