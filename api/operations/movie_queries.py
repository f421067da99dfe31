# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""Movie lookups

Builds the title search and detail queries and shapes the documents
returned by the store into response models.
"""
import logging
import re
from typing import List

from models import MovieTitle, MovieDetails
from store import (
    DocumentStore, DocumentNotFoundError, MissingParameterError, parse_object_id
)

logger = logging.getLogger(__name__)

TITLE_PROJECTION = {"title": 1, "_id": 1}
DETAILS_PROJECTION = {"title": 1, "year": 1, "directors": 1, "plot": 1}


class MovieQueries:
    """Read-only queries over the movies collection"""

    def __init__(self, store: DocumentStore, collection: str = "movies"):
        self.store = store
        self.collection = collection

    async def by_title(self, title: str) -> List[MovieTitle]:
        """Movies whose title contains `title`, ignoring case"""
        if not title:
            raise MissingParameterError("title")
        self.store.connection.require_connected()
        query = self.title_query(title)
        logger.debug(f"Title query: {query}")
        documents = await self.store.find(self.collection, query, TITLE_PROJECTION)
        return [self._to_title(doc) for doc in documents]

    async def details(self, movie_id: str) -> MovieDetails:
        """Title, year, directors and plot of one movie

        Raises:
            MissingParameterError: movie_id absent
            MalformedIdentifierError: movie_id is not an ObjectId
            DocumentNotFoundError: no movie with that id
        """
        object_id = parse_object_id(movie_id)
        self.store.connection.require_connected()
        document = await self.store.find(
            self.collection, {"_id": object_id}, DETAILS_PROJECTION, limit=True
        )
        if document is None:
            raise DocumentNotFoundError(self.collection, movie_id)
        return MovieDetails(**{key: document.get(key) for key in DETAILS_PROJECTION})

    @staticmethod
    def title_query(title: str) -> dict:
        """Case-insensitive substring filter on title

        The text is escaped so pattern characters match literally.
        """
        return {"title": {"$regex": re.escape(title), "$options": "i"}}

    @staticmethod
    def _to_title(document: dict) -> MovieTitle:
        return MovieTitle(id=str(document["_id"]), title=document.get("title"))
