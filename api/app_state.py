# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

from config import default_config, Config
from store import MongoConnection, DocumentStore


class StoreServices:
    """Document store dependencies

    Holds the single connection and the facade built on it.
    """

    def __init__(self, connection: MongoConnection):
        self.connection = connection
        self.documents = DocumentStore(connection)


class AppState:
    """Application state container

    Explicitly owned and injected into routes through app.state, so tests
    can build one around a fake client.
    """

    def __init__(self, config: Config = default_config, connection: MongoConnection = None):
        self.config = config
        self.store = StoreServices(connection or MongoConnection(config.mongo))

    # === Service Access Delegation (for route handlers) ===

    def get_connection(self) -> MongoConnection:
        """Get the document store connection"""
        return self.store.connection

    def get_document_store(self) -> DocumentStore:
        """Get the collection operations facade"""
        return self.store.documents

    def get_config(self) -> Config:
        return self.config

    # === Lifecycle Delegation ===

    async def connect_store(self):
        """Open the store connection (idempotent)"""
        await self.store.connection.connect()

    async def close_store(self):
        """Close the store connection if open"""
        if self.store.connection.is_connected:
            await self.store.connection.close()
