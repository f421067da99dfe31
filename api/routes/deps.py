# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""Route dependencies and helpers

Provides access to application state, reads comment bodies and maps
store errors to HTTP errors.
"""
import logging

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app_state import AppState
from models import CommentCreate
from operations.comment_queries import CommentQueries
from operations.movie_queries import MovieQueries
from store import (
    StoreError, MissingParameterError, MalformedIdentifierError, DocumentNotFoundError
)

# Client faults; every other StoreError is a store failure (500)
_STATUS_BY_ERROR = (
    (MissingParameterError, 400),
    (MalformedIdentifierError, 400),
    (DocumentNotFoundError, 404),
)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_app_state(request: Request) -> AppState:
    """Get AppState from request

    Encapsulates the request.app.state.app_state chain.
    """
    return request.app.state.app_state


def get_movie_queries(request: Request) -> MovieQueries:
    app_state = get_app_state(request)
    return MovieQueries(
        app_state.get_document_store(),
        app_state.get_config().collections.movies
    )


def get_comment_queries(request: Request) -> CommentQueries:
    app_state = get_app_state(request)
    return CommentQueries(
        app_state.get_document_store(),
        app_state.get_config().collections.comments
    )


async def get_comment_body(request: Request) -> CommentCreate:
    """Comment from a JSON or form-encoded body

    Raises:
        HTTPException: 400 when a JSON body does not parse
        RequestValidationError: fields missing or of the wrong type
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        data = dict(await request.form())
    else:
        try:
            data = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Request body is not valid JSON")
    try:
        return CommentCreate.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError([
            {**error, "loc": ("body", *error["loc"])}
            for error in e.errors(include_url=False)
        ])


def to_http_exception(error: StoreError) -> HTTPException:
    """HTTPException carrying the status code for a store error kind"""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=500, detail=str(error))


def logged_http_exception(error: StoreError, message: str,
                          logger: logging.Logger) -> HTTPException:
    """Map to HTTPException, logging store failures"""
    http_error = to_http_exception(error)
    if http_error.status_code >= 500:
        logger.error(f"{message}: {error}")
    return http_error


def log_response(request: Request, response, logger: logging.Logger) -> None:
    """Log the computed response before it is sent"""
    if get_app_state(request).get_config().api.log_responses:
        logger.info(f"{request.url.path} response: {response}")
