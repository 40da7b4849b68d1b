import logging

from fastapi import FastAPI
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.core.config import settings

logger = logging.getLogger(__name__)


async def connect_to_mongo(app: FastAPI) -> None:
    """Open the MongoDB client and attach it to the application state."""
    client = AsyncIOMotorClient(settings.MONGODB_URI)
    app.state.mongo_client = client
    app.state.db = client[settings.MONGODB_DB_NAME]
    await ensure_indexes(app.state.db)
    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB_NAME)


async def close_mongo_connection(app: FastAPI) -> None:
    """Close MongoDB connection."""
    client = getattr(app.state, "mongo_client", None)
    if client is not None:
        client.close()
        app.state.mongo_client = None
        logger.info("Closed MongoDB connection")


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    # one cart per user
    await db.carts.create_index("user_id", unique=True)
