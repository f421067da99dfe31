# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

from datetime import datetime, timezone
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class MovieTitle(BaseModel):
    """Title search hit"""
    id: str = Field(..., description="Movie identifier (24 hex digits)")
    title: Optional[str] = None


class MovieDetails(BaseModel):
    """Movie details; fields absent from the stored document are null"""
    title: Optional[str] = None
    # Seed data carries a few years as strings (e.g. "1995è")
    year: Optional[Union[int, str]] = None
    directors: Optional[List[str]] = None
    plot: Optional[str] = None


class CommentView(BaseModel):
    """Comment as listed for a movie (no identifiers exposed)"""
    name: Optional[str] = None
    email: Optional[str] = None
    text: Optional[str] = None
    date: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Stored dates are UTC; attach the zone when the driver drops it"""
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class CommentCreate(BaseModel):
    name: str = Field(..., description="Commenter name")
    email: str = Field(..., description="Commenter email")
    movieId: str = Field(..., description="Identifier of the commented movie")
    text: str = Field(..., description="Comment text")


class InsertResponse(BaseModel):
    """Insertion confirmation"""
    acknowledged: bool
    insertedId: str


class HealthResponse(BaseModel):
    """Store reachability report"""
    status: str
    database: str
    connected: bool
