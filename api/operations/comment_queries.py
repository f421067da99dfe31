# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""Comment listing and insertion"""
import logging
from datetime import datetime, timezone
from typing import List

from bson import ObjectId

from models import CommentView, CommentCreate, InsertResponse
from store import DocumentStore, parse_object_id

logger = logging.getLogger(__name__)

COMMENT_PROJECTION = {"name": 1, "email": 1, "text": 1, "date": 1}


class CommentQueries:
    """Queries over the comments collection"""

    def __init__(self, store: DocumentStore, collection: str = "comments"):
        self.store = store
        self.collection = collection

    async def for_movie(self, movie_id: str) -> List[CommentView]:
        """All comments whose movie_id equals movie_id (unordered)"""
        object_id = parse_object_id(movie_id)
        self.store.connection.require_connected()
        query = {"movie_id": object_id}
        logger.debug(f"Comment query: {query}")
        documents = await self.store.find(self.collection, query, COMMENT_PROJECTION)
        return [CommentView(**{key: doc.get(key) for key in COMMENT_PROJECTION})
                for doc in documents]

    async def add(self, comment: CommentCreate) -> InsertResponse:
        """Insert a comment with a fresh id and the current UTC time"""
        movie_id = parse_object_id(comment.movieId)
        self.store.connection.require_connected()
        document = self.build_document(comment, movie_id)
        result = await self.store.insert_one(self.collection, document)
        return InsertResponse(
            acknowledged=result.acknowledged,
            insertedId=str(result.inserted_id)
        )

    @staticmethod
    def build_document(comment: CommentCreate, movie_id: ObjectId) -> dict:
        """Comment document as stored"""
        return {
            "_id": ObjectId(),
            "name": comment.name,
            "email": comment.email,
            "movie_id": movie_id,
            "text": comment.text,
            "date": datetime.now(timezone.utc),
        }
