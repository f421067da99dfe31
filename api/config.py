# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""
Configuration constants for the movie comments API
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

# Accepted LOG_LEVEL values
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

@dataclass
class MongoConfig:
    """Document store connection configuration.

    `options` is handed to the driver client untouched (e.g. maxPoolSize,
    serverSelectionTimeoutMS, tz_aware).
    """
    uri: str = "mongodb://localhost:27017"
    database: str = "sample_mflix"
    options: Dict[str, Any] = field(default_factory=dict)
    ping_on_connect: bool = True  # Verify the server answers before serving

@dataclass
class CollectionConfig:
    """Collection names"""
    movies: str = "movies"
    comments: str = "comments"

@dataclass
class ServerConfig:
    """HTTP server configuration"""
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

@dataclass
class ApiConfig:
    """Route behaviour switches"""
    # Answer a missing title with HTTP 200 and the body "Error" instead of a 400
    missing_title_sentinel: bool = False
    log_responses: bool = True

@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

@dataclass
class Config:
    """Main configuration container"""
    mongo: MongoConfig
    collections: CollectionConfig
    server: ServerConfig
    api: ApiConfig
    logging: LoggingConfig

    @classmethod
    def from_env(cls) -> 'Config':
        """Create config from environment - delegates to EnvironmentConfigLoader"""
        from environment_config_loader import EnvironmentConfigLoader
        return EnvironmentConfigLoader().load()

# Default instance
default_config = Config.from_env()
