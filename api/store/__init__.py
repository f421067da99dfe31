# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""Document store access layer.

- MongoConnection: connection lifecycle only
- DocumentStore: generic collection operations over the shared connection
- errors: store error taxonomy shared with the routes
"""

from .connection import MongoConnection
from .document_store import DocumentStore
from .errors import (
    StoreError,
    StoreConnectionError,
    NotConnectedError,
    StoreOperationError,
    MalformedIdentifierError,
    MissingParameterError,
    DocumentNotFoundError,
)
from .identifiers import parse_object_id

__all__ = [
    "MongoConnection",
    "DocumentStore",
    "StoreError",
    "StoreConnectionError",
    "NotConnectedError",
    "StoreOperationError",
    "MalformedIdentifierError",
    "MissingParameterError",
    "DocumentNotFoundError",
    "parse_object_id",
]
