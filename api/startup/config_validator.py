# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""
Configuration validator for startup checks.

Validates configuration settings early to provide clear error messages
before the application attempts to connect with invalid settings.
"""
from typing import List

from config import LOG_LEVELS

MONGO_SCHEMES = ("mongodb://", "mongodb+srv://")


class ConfigValidationError(Exception):
    """Configuration validation failed"""
    pass


class ConfigValidator:
    """Validates configuration settings on startup"""

    def __init__(self, config):
        self.config = config
        self.errors: List[str] = []

    def validate(self) -> None:
        """Validate all configuration settings

        Raises:
            ConfigValidationError: If validation fails
        """
        self.errors = []
        self._validate_mongo_uri()
        self._validate_database_name()
        self._validate_collections()
        self._validate_port()
        self._validate_log_level()

        if self.errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(
                f"  - {error}" for error in self.errors
            )
            raise ConfigValidationError(error_msg)

    def _validate_mongo_uri(self) -> None:
        uri = self.config.mongo.uri
        if not uri.startswith(MONGO_SCHEMES):
            self.errors.append(
                f"MONGO_URI must start with one of {', '.join(MONGO_SCHEMES)}: {uri!r}"
            )

    def _validate_database_name(self) -> None:
        name = self.config.mongo.database
        if not name or not name.strip():
            self.errors.append("MONGO_DB must not be empty")
        elif any(char in name for char in '/\\. "$'):
            self.errors.append(f"MONGO_DB contains characters MongoDB rejects: {name!r}")

    def _validate_collections(self) -> None:
        collections = self.config.collections
        for env_var, name in (("MOVIES_COLLECTION", collections.movies),
                              ("COMMENTS_COLLECTION", collections.comments)):
            if not name or name.startswith("system.") or "$" in name:
                self.errors.append(f"{env_var} is not a usable collection name: {name!r}")

    def _validate_port(self) -> None:
        port = self.config.server.port
        if not 0 < port < 65536:
            self.errors.append(f"API_PORT out of range: {port}")

    def _validate_log_level(self) -> None:
        level = self.config.logging.level
        if level not in LOG_LEVELS:
            self.errors.append(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}: {level!r}"
            )
