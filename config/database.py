"""Database configuration for async MongoDB connection using Motor."""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from typing import Optional

from config.settings import Settings


class Database:
    """MongoDB database connection manager."""

    client: Optional[AsyncIOMotorClient] = None
    db: Optional[AsyncIOMotorDatabase] = None

    def __init__(self, settings: Settings):
        self.settings = settings

    async def connect(self, client=None) -> None:
        """
        Establish connection to MongoDB.

        Args:
            client: An already constructed client to use instead of opening
                one from MONGODB_URL (e.g. an in-memory client in tests)
        """
        if client is None:
            client = AsyncIOMotorClient(
                self.settings.MONGODB_URL,
                maxPoolSize=10,
                minPoolSize=1
            )
        self.client = client
        self.db = self.client[self.settings.DATABASE_NAME]

    async def disconnect(self) -> None:
        """Close MongoDB connection."""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None

    @property
    def is_connected(self) -> bool:
        return self.db is not None

    async def health_check(self) -> bool:
        """Check if database connection is healthy."""
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except Exception:
            return False

    def get_collection(self, collection_name: str):
        """Get a specific collection from the database."""
        if self.db is None:
            raise RuntimeError("Database is not connected")
        return self.db[collection_name]
