"""
Tests for the document store connection manager

Tests use the in-memory fake client, so no MongoDB server is required.
"""
import asyncio

import pytest
from unittest.mock import Mock
from pymongo.errors import ConfigurationError

from config import MongoConfig
from store import MongoConnection, StoreConnectionError, NotConnectedError
from tests.fake_motor import FakeMotorClient

pytestmark = pytest.mark.asyncio


class TestConnect:
    """Test MongoConnection.connect"""

    async def test_connect_selects_database(self, connection, client_factory):
        await connection.connect()

        assert connection.is_connected
        assert connection.database.name == "test_mflix"
        client_factory.assert_called_once_with("mongodb://localhost:27017", tz_aware=True)

    async def test_connect_is_idempotent(self, connection, client_factory):
        """Second connect on an open connection builds no new client"""
        await connection.connect()
        database = connection.database

        await connection.connect()

        assert client_factory.call_count == 1
        assert connection.database is database

    async def test_concurrent_connects_share_one_client(self, connection, client_factory):
        await asyncio.gather(*(connection.connect() for _ in range(5)))

        assert client_factory.call_count == 1

    async def test_options_passed_to_client(self, client_factory):
        config = MongoConfig(database="films", options={"maxPoolSize": 5, "tz_aware": True})
        connection = MongoConnection(config, client_factory=client_factory)

        await connection.connect()

        assert connection.client.options == {"maxPoolSize": 5, "tz_aware": True}

    async def test_dates_decode_as_utc_by_default(self, connection):
        await connection.connect()

        assert connection.client.options == {"tz_aware": True}

    async def test_tz_aware_can_be_overridden(self, client_factory):
        config = MongoConfig(options={"tz_aware": False})
        connection = MongoConnection(config, client_factory=client_factory)

        await connection.connect()

        assert connection.client.options == {"tz_aware": False}

    async def test_client_factory_error(self):
        factory = Mock(side_effect=ConfigurationError("bad uri"))
        connection = MongoConnection(MongoConfig(), client_factory=factory)

        with pytest.raises(StoreConnectionError, match="bad uri"):
            await connection.connect()
        assert not connection.is_connected

    async def test_client_factory_returns_none(self):
        connection = MongoConnection(MongoConfig(), client_factory=Mock(return_value=None))

        with pytest.raises(StoreConnectionError, match="client is undefined"):
            await connection.connect()

    async def test_unreachable_server_fails_and_closes_client(self):
        clients = []

        def factory(uri, **options):
            client = FakeMotorClient(uri, reachable=False, **options)
            clients.append(client)
            return client

        connection = MongoConnection(MongoConfig(), client_factory=factory)

        with pytest.raises(StoreConnectionError, match="ping"):
            await connection.connect()

        assert not connection.is_connected
        assert clients[0].closed

    async def test_ping_skipped_when_disabled(self):
        factory = Mock(side_effect=lambda uri, **options: FakeMotorClient(uri, reachable=False))
        connection = MongoConnection(MongoConfig(ping_on_connect=False), client_factory=factory)

        await connection.connect()

        assert connection.is_connected

    async def test_retry_after_failed_connect(self, client_factory):
        """A failed connect leaves nothing behind; the next call starts over"""
        client_factory.side_effect = [
            ConfigurationError("temporary"),
            FakeMotorClient("mongodb://localhost:27017"),
        ]
        connection = MongoConnection(MongoConfig(), client_factory=client_factory)

        with pytest.raises(StoreConnectionError):
            await connection.connect()
        await connection.connect()

        assert connection.is_connected
        assert client_factory.call_count == 2


class TestNotConnected:
    """Operations without an active connection fail fast"""

    async def test_database_requires_connection(self, connection):
        with pytest.raises(NotConnectedError):
            connection.database

    async def test_collection_requires_connection(self, connection):
        with pytest.raises(NotConnectedError):
            connection.collection("movies")

    async def test_ping_requires_connection(self, connection):
        with pytest.raises(NotConnectedError):
            await connection.ping()


class TestClose:
    """Test MongoConnection.close"""

    async def test_close_releases_client(self, connection):
        await connection.connect()
        client = connection.client

        await connection.close()

        assert client.closed
        assert not connection.is_connected
        with pytest.raises(NotConnectedError):
            connection.collection("comments")

    async def test_close_without_connection(self, connection):
        with pytest.raises(NotConnectedError, match="Not connected"):
            await connection.close()

    async def test_reconnect_after_close(self, connection, client_factory):
        await connection.connect()
        await connection.close()

        await connection.connect()

        assert connection.is_connected
        assert client_factory.call_count == 2


class TestPing:
    """Test MongoConnection.ping"""

    async def test_ping_succeeds(self, connection):
        await connection.connect()
        await connection.ping()

    async def test_ping_failure_raises_connection_error(self, connection):
        await connection.connect()
        connection.client.reachable = False

        with pytest.raises(StoreConnectionError):
            await connection.ping()
