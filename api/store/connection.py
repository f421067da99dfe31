# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""
Document store connection management.

Single Responsibility: connection lifecycle only. Owns one client and one
database handle; every collection operation goes through this object.
"""
import asyncio
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from config import default_config, MongoConfig
from .errors import StoreConnectionError, NotConnectedError

logger = logging.getLogger(__name__)

# BSON dates carry no zone; decode them as UTC
DEFAULT_CLIENT_OPTIONS = {"tz_aware": True}


class MongoConnection:
    """Manages the async MongoDB client.

    connect() is idempotent: a second call on an open connection returns
    without creating another client. Nothing reconnects automatically.
    """

    def __init__(self, config: MongoConfig = default_config.mongo,
                 client_factory=AsyncIOMotorClient):
        self.config = config
        self._client_factory = client_factory
        self._client = None
        self._database: Optional[AsyncIOMotorDatabase] = None
        self._lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._database is not None

    @property
    def client(self):
        self.require_connected()
        return self._client

    @property
    def database(self) -> AsyncIOMotorDatabase:
        """Active database handle

        Raises:
            NotConnectedError: connect() has not succeeded
        """
        self.require_connected()
        return self._database

    def require_connected(self) -> None:
        """Fail fast when no connection is active"""
        if not self.is_connected:
            raise NotConnectedError()

    def collection(self, name: str):
        """Access the named collection"""
        return self.database[name]

    async def connect(self) -> None:
        """Establish the connection (no-op when already connected)

        Raises:
            StoreConnectionError: client creation, database selection or
                the initial ping failed
        """
        if self.is_connected:
            return
        async with self._lock:
            if self.is_connected:
                return
            client = self._create_client()
            try:
                database = self._select_database(client)
                if self.config.ping_on_connect:
                    await self._ping(client)
            except StoreConnectionError:
                client.close()
                raise
            self._client = client
            self._database = database
            logger.info(f"Connected to database '{self.config.database}'")

    def client_options(self) -> dict:
        """Driver options; datetimes decode as aware UTC unless overridden"""
        return {**DEFAULT_CLIENT_OPTIONS, **self.config.options}

    def _create_client(self):
        try:
            client = self._client_factory(self.config.uri, **self.client_options())
        except (PyMongoError, TypeError, ValueError) as e:
            raise StoreConnectionError(f"Could not create client: {e}") from e
        if client is None:
            raise StoreConnectionError("client is undefined")
        return client

    def _select_database(self, client):
        try:
            database = client[self.config.database]
        except (PyMongoError, TypeError, ValueError) as e:
            raise StoreConnectionError(
                f"Could not select database '{self.config.database}': {e}"
            ) from e
        if database is None:
            raise StoreConnectionError(f"database '{self.config.database}' is undefined")
        return database

    @staticmethod
    async def _ping(client) -> None:
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            raise StoreConnectionError(f"Server did not answer ping: {e}") from e

    async def ping(self) -> None:
        """Check the server answers on the active connection"""
        await self._ping(self.client)

    async def close(self) -> None:
        """Close the connection

        Raises:
            NotConnectedError: nothing to close
        """
        if self._client is None:
            raise NotConnectedError()
        client = self._client
        self._client = None
        self._database = None
        client.close()
        logger.info("Database connection closed")
