# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""
Environment configuration loader.

Logic for reading environment variables lives with the data source
(environment) rather than in the Config dataclasses.
"""
import json
import os
from typing import Any, Dict, List

from config import (
    Config, MongoConfig, CollectionConfig, ServerConfig, ApiConfig, LoggingConfig
)

class EnvironmentConfigLoader:
    """Loads configuration from environment variables.

    Single Responsibility: Environment access logic.
    """

    def load(self) -> Config:
        """Create Config from environment variables"""
        return Config(
            mongo=self._load_mongo_config(),
            collections=self._load_collection_config(),
            server=self._load_server_config(),
            api=self._load_api_config(),
            logging=self._load_logging_config()
        )

    def _load_mongo_config(self) -> MongoConfig:
        """Load document store configuration from environment"""
        return MongoConfig(
            uri=self._get_optional("MONGO_URI", MongoConfig.uri),
            database=self._get_optional("MONGO_DB", MongoConfig.database),
            options=self._get_json_object("MONGO_OPTIONS"),
            ping_on_connect=self._get_bool("MONGO_PING_ON_CONNECT", True)
        )

    def _load_collection_config(self) -> CollectionConfig:
        """Load collection names from environment"""
        return CollectionConfig(
            movies=self._get_optional("MOVIES_COLLECTION", CollectionConfig.movies),
            comments=self._get_optional("COMMENTS_COLLECTION", CollectionConfig.comments)
        )

    def _load_server_config(self) -> ServerConfig:
        """Load HTTP server configuration from environment"""
        return ServerConfig(
            host=self._get_optional("API_HOST", ServerConfig.host),
            port=self._get_int("API_PORT", ServerConfig.port),
            cors_origins=self._get_list("CORS_ORIGINS", ["*"])
        )

    def _load_api_config(self) -> ApiConfig:
        """Load route behaviour switches from environment"""
        return ApiConfig(
            missing_title_sentinel=self._get_bool("MISSING_TITLE_SENTINEL", False),
            log_responses=self._get_bool("LOG_RESPONSES", True)
        )

    def _load_logging_config(self) -> LoggingConfig:
        """Load logging configuration from environment"""
        return LoggingConfig(
            level=self._get_optional("LOG_LEVEL", LoggingConfig.level).upper()
        )

    def _get_optional(self, key: str, default: str) -> str:
        """Get optional string environment variable"""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable"""
        value = os.getenv(key, str(default).lower())
        return value.lower() == "true"

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable"""
        value = os.getenv(key, str(default))
        return int(value)

    def _get_list(self, key: str, default: List[str]) -> List[str]:
        """Get comma separated environment variable"""
        value = os.getenv(key)
        if not value:
            return list(default)
        return [item.strip() for item in value.split(",") if item.strip()]

    def _get_json_object(self, key: str) -> Dict[str, Any]:
        """Get JSON object environment variable (empty dict when unset)"""
        value = os.getenv(key)
        if not value:
            return {}
        parsed = json.loads(value)
        if not isinstance(parsed, dict):
            raise ValueError(f"{key} must be a JSON object, got: {value}")
        return parsed
