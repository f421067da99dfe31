# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""ObjectId parsing for identifiers arriving as strings."""
from bson import ObjectId
from bson.errors import InvalidId

from .errors import MalformedIdentifierError, MissingParameterError


def parse_object_id(value, parameter: str = "movieId") -> ObjectId:
    """Parse a 24-hex-digit string into an ObjectId

    Raises:
        MissingParameterError: value is None or empty
        MalformedIdentifierError: value is not a valid ObjectId
    """
    if isinstance(value, ObjectId):
        return value
    if value is None or value == "":
        raise MissingParameterError(parameter)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise MalformedIdentifierError(value)
