# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""
Movie routes module

- GET /getMoviesByTitle: case-insensitive title search
- GET /details: title, year, directors and plot of one movie
"""
import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Request

from models import MovieTitle, MovieDetails
from operations.movie_queries import MovieQueries
from routes.deps import (
    get_app_state, get_movie_queries, log_response, logged_http_exception, to_http_exception
)
from store import StoreError, MissingParameterError

logger = logging.getLogger(__name__)

router = APIRouter()

# Body returned for a missing title when the legacy sentinel is enabled
MISSING_TITLE_SENTINEL = "Error"


@router.get("/getMoviesByTitle", response_model=Union[List[MovieTitle], str])
async def get_movies_by_title(
    request: Request,
    title: Optional[str] = None,
    queries: MovieQueries = Depends(get_movie_queries),
):
    """
    Search movies by title substring

    Args:
        title: text the title must contain (case-insensitive)

    Returns:
        List of {id, title}
    """
    try:
        movies = await queries.by_title(title)
    except MissingParameterError as e:
        if get_app_state(request).get_config().api.missing_title_sentinel:
            log_response(request, MISSING_TITLE_SENTINEL, logger)
            return MISSING_TITLE_SENTINEL
        raise to_http_exception(e)
    except StoreError as e:
        raise logged_http_exception(e, f"Title search failed for {title!r}", logger)
    log_response(request, movies, logger)
    return movies


@router.get("/details", response_model=MovieDetails)
async def get_movie_details(
    request: Request,
    movieId: Optional[str] = None,
    queries: MovieQueries = Depends(get_movie_queries),
):
    """
    Movie details

    Args:
        movieId: movie identifier (24 hex digits)

    Returns:
        {title, year, directors, plot}
    """
    try:
        details = await queries.details(movieId)
    except StoreError as e:
        raise logged_http_exception(e, f"Details lookup failed for {movieId}", logger)
    log_response(request, details, logger)
    return details
