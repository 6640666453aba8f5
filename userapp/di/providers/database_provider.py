from typing import TYPE_CHECKING
from userapp.infrastructure.db.mongo_connection import MongoClientManager

if TYPE_CHECKING:
    from ..container import DIContainer

MONGO_CLIENT = "mongo_client"


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register all database connections in the container.
        The connection is verified here so an unreachable server aborts startup,
        and closing is handed to the container's cleanup path.
        """
        settings = container.settings
        mongo_client = MongoClientManager(
            uri=settings.mongo_uri,
            database_name=settings.mongo_database_name,
            server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
        )
        mongo_client.connect()
        container.register_cleanup(mongo_client.close)

        # Register MongoDB client as singleton
        container.register_singleton(MONGO_CLIENT, mongo_client)
