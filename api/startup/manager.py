# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""Startup manager - orchestrates application initialization and shutdown."""
import logging

from app_state import AppState
from logging_config import configure_logging
from startup.config_validator import ConfigValidator

logger = logging.getLogger(__name__)


class StartupManager:
    """Manages application startup.

    Order: logging, config validation, store connection. The connection
    must succeed before the app serves requests.
    """

    def __init__(self, app_state: AppState):
        self.state = app_state

    async def initialize(self):
        """Initialize all components"""
        config = self.state.get_config()
        configure_logging(config.logging)
        logger.info("Initializing movie comments API...")
        self._validate_config()
        await self._connect_store()
        logger.info(f"API ready on http://{config.server.host}:{config.server.port}/")

    async def shutdown(self):
        """Release resources"""
        await self.state.close_store()

    def _validate_config(self):
        """Validate configuration before startup"""
        validator = ConfigValidator(self.state.get_config())
        validator.validate()

    async def _connect_store(self):
        """Open the document store connection"""
        mongo = self.state.get_config().mongo
        logger.info(f"Connecting to database '{mongo.database}'...")
        await self.state.connect_store()
