# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""
Centralized logging configuration.

Configures the root logger once at startup and quiets the driver loggers
that would otherwise flood logs with connection-pool chatter.
"""
import logging

from config import LoggingConfig

_SUPPRESSED_LOGGERS = [
    'pymongo',
    'motor',
]


def configure_logging(config: LoggingConfig) -> None:
    """Apply level and format to the root logger"""
    logging.basicConfig(level=config.level, format=config.format)
    logging.getLogger().setLevel(config.level)
    for logger_name in _SUPPRESSED_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
