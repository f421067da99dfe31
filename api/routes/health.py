# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""Health and info routes."""
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from models import HealthResponse
from routes.deps import get_app_state
from store import StoreError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", include_in_schema=False)
async def root():
    """Root endpoint with API information"""
    return {
        "message": "Movie Comments API",
        "docs": "/docs",
        "health": "/health"
    }


@router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    """
    Health check endpoint

    Pings the document store; 503 when it does not answer
    """
    app_state = get_app_state(request)
    database = app_state.get_config().mongo.database
    try:
        await app_state.get_connection().ping()
    except StoreError as e:
        logger.warning(f"Health check failed: {e}")
        unavailable = HealthResponse(status="unavailable", database=database, connected=False)
        return JSONResponse(status_code=503, content=unavailable.model_dump())

    return HealthResponse(status="healthy", database=database, connected=True)
