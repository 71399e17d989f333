# Database connection configuration
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorGridFSBucket
from pymongo import DESCENDING
from config.settings import get_settings
import logging

logger = logging.getLogger(__name__)
settings = get_settings()

class Database:
    client: AsyncIOMotorClient = None
    db: AsyncIOMotorDatabase = None
    bucket: AsyncIOMotorGridFSBucket = None

    @classmethod
    async def connect_db(cls):
        try:
            client_options = {}
            if settings.service_account_path:
                # X.509 credential file for managed clusters
                client_options['tls'] = True
                client_options['tlsCertificateKeyFile'] = settings.service_account_path
                client_options['authMechanism'] = 'MONGODB-X509'

            cls.client = AsyncIOMotorClient(settings.mongo_url, **client_options)
            cls.db = cls.client[settings.db_name]
            cls.bucket = AsyncIOMotorGridFSBucket(cls.db, bucket_name=settings.gridfs_bucket)

            # Scan history is read newest-first by operators
            await cls.db[settings.scans_collection].create_index([('scannedAt', DESCENDING)])

            logger.info(f'Connected to MongoDB: {settings.db_name} (bucket: {settings.gridfs_bucket})')
        except Exception as e:
            logger.error(f'Failed to connect to MongoDB: {e}')
            raise

    @classmethod
    async def close_db(cls):
        if cls.client:
            cls.client.close()
            logger.info('Closed MongoDB connection')

    @classmethod
    def get_db(cls) -> AsyncIOMotorDatabase:
        return cls.db

    @classmethod
    def get_bucket(cls) -> AsyncIOMotorGridFSBucket:
        return cls.bucket
