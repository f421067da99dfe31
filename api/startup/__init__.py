# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""Application startup: configuration validation and store connection."""
from .config_validator import ConfigValidator, ConfigValidationError
from .manager import StartupManager

__all__ = ["ConfigValidator", "ConfigValidationError", "StartupManager"]
