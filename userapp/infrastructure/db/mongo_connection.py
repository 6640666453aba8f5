"""
MongoDB Client
==============

MongoDB client manager for database connections. One instance is created by
the DatabaseProvider and shared through the container.
"""
import logging
from typing import Optional
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from userapp.core.exceptions import StartupFailure

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    MongoDB client manager.

    Manages the MongoDB connection and provides access to collections.
    """

    def __init__(self, uri: str, database_name: str, server_selection_timeout_ms: int = 5000):
        self._uri = uri
        self._database_name = database_name
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None

    def connect(self) -> None:
        """
        Open the client and verify the server is reachable.

        MongoClient connects lazily, so a ping is issued to surface an
        unreachable or misconfigured server at startup.

        Raises:
            StartupFailure: If the client cannot be created or the ping fails
        """
        if self._client is not None:
            return  # Already connected

        try:
            client = MongoClient(self._uri, serverSelectionTimeoutMS=self._server_selection_timeout_ms)
        except PyMongoError as e:
            raise StartupFailure(f"Invalid MongoDB configuration: {e}") from e

        try:
            client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            raise StartupFailure(f"MongoDB is unreachable: {e}") from e

        self._client = client
        self._database = client[self._database_name]
        logger.info("Connected to MongoDB: %s", self._database_name)

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self.connect()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        database = self.get_database()
        return database[collection_name]

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")
