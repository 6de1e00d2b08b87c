"""
MongoDB connection and initialization using Beanie ODM.
"""

from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from typing import Optional
from loguru import logger

from config.settings import settings
from recipes_api.models import DOCUMENT_MODELS


class MongoDB:
    """MongoDB connection manager."""

    client: Optional[AsyncIOMotorClient] = None
    db = None

    @classmethod
    async def connect(cls):
        """Connect to MongoDB and initialize Beanie."""
        try:
            logger.info(f"Connecting to MongoDB database '{settings.mongodb_db_name}'")

            timeout_ms = int(settings.request_timeout_seconds * 1000)
            cls.client = AsyncIOMotorClient(
                settings.mongo_uri,
                minPoolSize=settings.mongodb_min_pool_size,
                maxPoolSize=settings.mongodb_max_pool_size,
                serverSelectionTimeoutMS=timeout_ms,
                socketTimeoutMS=timeout_ms,
            )

            cls.db = cls.client[settings.mongodb_db_name]

            await init_beanie(
                database=cls.db,
                document_models=DOCUMENT_MODELS,
            )

            logger.success("Successfully connected to MongoDB and initialized Beanie")

        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    @classmethod
    async def disconnect(cls):
        """Disconnect from MongoDB."""
        if cls.client:
            cls.client.close()
            cls.client = None
            logger.info("Disconnected from MongoDB")

    @classmethod
    async def ping(cls) -> bool:
        """Check MongoDB connection."""
        if cls.client is None:
            return False
        try:
            await cls.client.admin.command("ping")
            return True
        except Exception as e:
            logger.error(f"MongoDB ping failed: {e}")
            return False


# Global instance
mongodb = MongoDB()
