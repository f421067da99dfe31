# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""Store error taxonomy.

Client faults (missing or malformed input, unknown documents) and store
faults (connection, driver) share one base so routes can map each kind
to a status code.
"""


class StoreError(Exception):
    """Base class for document store errors"""
    pass


class StoreConnectionError(StoreError):
    """Connecting to the document store failed"""
    pass


class NotConnectedError(StoreError):
    """Operation attempted without an active connection"""

    def __init__(self, message: str = "Not connected"):
        super().__init__(message)


class StoreOperationError(StoreError):
    """A driver call failed after the connection was established"""
    pass


class MalformedIdentifierError(StoreError):
    """Identifier cannot be parsed into an ObjectId"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Malformed identifier: {value!r}")


class MissingParameterError(StoreError):
    """Required query or body parameter absent"""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Missing required parameter: {parameter}")


class DocumentNotFoundError(StoreError):
    """No document matched an identity lookup"""

    def __init__(self, collection: str, identifier):
        self.collection = collection
        self.identifier = identifier
        super().__init__(f"No document in '{collection}' with id {identifier}")
