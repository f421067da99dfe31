# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""
Comment routes module

- GET /comments: comments of one movie
- POST /addComment: insert a comment
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request

from models import CommentView, CommentCreate, InsertResponse
from operations.comment_queries import CommentQueries
from routes.deps import (
    get_comment_body, get_comment_queries, log_response, logged_http_exception
)
from store import StoreError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/comments", response_model=List[CommentView])
async def get_comments(
    request: Request,
    movieId: Optional[str] = None,
    queries: CommentQueries = Depends(get_comment_queries),
):
    """
    Comments of a movie

    Args:
        movieId: movie identifier (24 hex digits)

    Returns:
        List of {name, email, text, date}
    """
    try:
        comments = await queries.for_movie(movieId)
    except StoreError as e:
        raise logged_http_exception(e, f"Comment listing failed for {movieId}", logger)
    log_response(request, comments, logger)
    return comments


@router.post("/addComment", response_model=InsertResponse)
async def add_comment(
    request: Request,
    comment: CommentCreate = Depends(get_comment_body),
    queries: CommentQueries = Depends(get_comment_queries),
):
    """
    Insert a comment for a movie

    Accepts a JSON or form-encoded body. The comment gets a fresh id and
    the current server time.

    Returns:
        {acknowledged, insertedId}
    """
    try:
        result = await queries.add(comment)
    except StoreError as e:
        raise logged_http_exception(e, f"Comment insert failed for {comment.movieId}", logger)
    log_response(request, result, logger)
    return result
