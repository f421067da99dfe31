"""
Pytest configuration and shared fixtures

Common fixtures used across multiple test files are defined here.
"""
import asyncio
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock

import pytest
from bson import ObjectId

# Add api directory to path for imports
api_path = Path(__file__).parent.parent / "api"
sys.path.insert(0, str(api_path))

from tests.fake_motor import FakeMotorClient  # noqa: E402


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def app_config():
    """Config with test database name and defaults elsewhere"""
    from config import (
        Config, MongoConfig, CollectionConfig, ServerConfig, ApiConfig, LoggingConfig
    )
    return Config(
        mongo=MongoConfig(uri="mongodb://localhost:27017", database="test_mflix"),
        collections=CollectionConfig(),
        server=ServerConfig(),
        api=ApiConfig(),
        logging=LoggingConfig(),
    )


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def client_factory():
    """Mock standing in for AsyncIOMotorClient; records every client built"""
    return Mock(side_effect=lambda uri, **options: FakeMotorClient(uri, **options))


@pytest.fixture
def connection(app_config, client_factory):
    """Unconnected MongoConnection over the fake client"""
    from store import MongoConnection
    return MongoConnection(app_config.mongo, client_factory=client_factory)


@pytest.fixture
def app_state(app_config, connection):
    """AppState whose connection is already open"""
    from app_state import AppState
    state = AppState(app_config, connection)
    asyncio.run(state.connect_store())
    return state


@pytest.fixture
def fake_db(app_state):
    """The in-memory database behind app_state"""
    return app_state.get_connection().database


# =============================================================================
# Test Data Fixtures
# =============================================================================

@pytest.fixture
def movie_ids():
    return {
        "blacksmith": ObjectId("573a1390f29313caabcd4135"),
        "great_train": ObjectId("573a1390f29313caabcd42e8"),
        "black_cat": ObjectId("573a1391f29313caabcd68d0"),
    }


@pytest.fixture
def seeded_db(fake_db, movie_ids):
    """Movies and comments shaped like the sample_mflix seed data"""
    fake_db["movies"].documents.extend([
        {
            "_id": movie_ids["blacksmith"],
            "title": "Blacksmith Scene",
            "year": 1893,
            "directors": ["William K.L. Dickson"],
            "plot": "Three men hammer on an anvil and pass a bottle of beer around.",
            "runtime": 1,
        },
        {
            "_id": movie_ids["great_train"],
            "title": "The Great Train Robbery",
            "year": 1903,
            "directors": ["Edwin S. Porter"],
            "plot": "A group of bandits stage a brazen train hold-up.",
            "runtime": 11,
        },
        {
            "_id": movie_ids["black_cat"],
            "title": "The Black Cat",
            "year": 1934,
            "directors": ["Edgar G. Ulmer"],
            "plot": "An American honeymooning couple in Hungary become trapped.",
            "runtime": 65,
        },
    ])
    fake_db["comments"].documents.extend([
        {
            "_id": ObjectId(),
            "name": "Mercedes Tyler",
            "email": "mercedes_tyler@fakegmail.com",
            "movie_id": movie_ids["great_train"],
            "text": "Eius veritatis vero facilis quaerat fuga temporibus.",
            "date": datetime(2002, 8, 18, 4, 56, 7),
        },
        {
            "_id": ObjectId(),
            "name": "John Bishop",
            "email": "john_bishop@fakegmail.com",
            "movie_id": movie_ids["great_train"],
            "text": "Id error ab at molestias dolorum incidunt.",
            "date": datetime(1975, 1, 21, 0, 31, 22),
        },
        {
            "_id": ObjectId(),
            "name": "Taylor Hill",
            "email": "taylor_hill@fakegmail.com",
            "movie_id": movie_ids["black_cat"],
            "text": "Neque nihil quia error.",
            "date": datetime(1990, 5, 2, 12, 0, 0),
        },
    ])
    return fake_db


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def api_client(app_state):
    """TestClient over the real app with app_state swapped in (no lifespan)"""
    from fastapi.testclient import TestClient
    from main import app

    previous = app.state.app_state
    app.state.app_state = app_state
    yield TestClient(app)
    app.state.app_state = previous
