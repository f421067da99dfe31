# Copyright (c) 2024 Movie Comments API Contributors
# SPDX-License-Identifier: MIT

"""Generic document operations over the shared connection.

Each method is a thin named pass-through to the driver call of the same
purpose. Query construction stays with the callers; nothing here knows
about movies or comments.
"""
from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pymongo.errors import PyMongoError

from .connection import MongoConnection
from .errors import StoreOperationError

Sort = Union[str, Mapping[str, int], Sequence]
Limit = Union[bool, int]


@contextmanager
def _driver_errors(operation: str, collection_name: str):
    """Re-raise driver failures as StoreOperationError"""
    try:
        yield
    except PyMongoError as e:
        raise StoreOperationError(f"{operation} on '{collection_name}' failed: {e}") from e


def _sort_spec(sort: Sort) -> List:
    """Normalize a field name, mapping or pair list into (field, direction) pairs"""
    if isinstance(sort, str):
        return [(sort, 1)]
    if isinstance(sort, Mapping):
        return list(sort.items())
    return list(sort)


def _limit_count(limit: Limit) -> int:
    """True means exactly one document"""
    return 1 if limit is True else int(limit)


class DocumentStore:
    """Collection operations requiring an active MongoConnection.

    All methods raise NotConnectedError when the connection is not open.
    """

    def __init__(self, connection: MongoConnection):
        self.connection = connection

    def collection(self, collection_name: str):
        """Access the raw driver collection"""
        return self.connection.collection(collection_name)

    def find_cursor(self, collection_name: str, query: Dict, projection: Optional[Dict] = None,
                    sort: Optional[Sort] = None, limit: Limit = False, skip: int = 0):
        """Create a lazy cursor for a query

        Args:
            projection: fields to include/exclude
            sort: field name, {field: direction} or [(field, direction)]
            limit: maximum documents, True meaning one, False meaning all
            skip: documents to skip before the first returned one
        """
        collection = self.collection(collection_name)
        cursor = collection.find(query, projection or None)
        if sort:
            cursor = cursor.sort(_sort_spec(sort))
        if limit:
            cursor = cursor.limit(_limit_count(limit))
        if skip:
            cursor = cursor.skip(skip)
        return cursor

    async def find(self, collection_name: str, query: Dict, projection: Optional[Dict] = None,
                   sort: Optional[Sort] = None, limit: Limit = False, skip: int = 0):
        """Materialize the documents matching a query

        Returns:
            List of documents, or the single document (None when nothing
            matched) when limit is True
        """
        cursor = self.find_cursor(collection_name, query, projection, sort, limit, skip)
        with _driver_errors("find", collection_name):
            result = await cursor.to_list(length=None)
        if limit is True:
            return result[0] if result else None
        return result

    async def find_one(self, collection_name: str, query: Dict,
                       projection: Optional[Dict] = None) -> Optional[Dict]:
        """First matching document or None"""
        return await self.find(collection_name, query, projection, limit=True)

    async def distinct(self, collection_name: str, field: str,
                       query: Optional[Dict] = None, options: Optional[Dict] = None) -> List:
        """Distinct values of a field among matching documents"""
        collection = self.collection(collection_name)
        with _driver_errors("distinct", collection_name):
            return await collection.distinct(field, query or {}, **(options or {}))

    async def collection_exists(self, collection_name: str) -> bool:
        """Check if a collection exists in the database"""
        database = self.connection.database
        with _driver_errors("list_collection_names", collection_name):
            names = await database.list_collection_names(filter={"name": collection_name})
        return collection_name in names

    async def insert_one(self, collection_name: str, document: Dict,
                         options: Optional[Dict] = None):
        """Insert one document

        The driver adds an _id to the document when it has none, mutating it.
        """
        collection = self.collection(collection_name)
        with _driver_errors("insert_one", collection_name):
            return await collection.insert_one(document, **(options or {}))

    async def insert_many(self, collection_name: str, documents: List[Dict],
                          options: Optional[Dict] = None):
        """Insert several documents, adding _id to each one missing it"""
        collection = self.collection(collection_name)
        with _driver_errors("insert_many", collection_name):
            return await collection.insert_many(documents, **(options or {}))

    async def delete_one(self, collection_name: str, query: Dict,
                         options: Optional[Dict] = None):
        collection = self.collection(collection_name)
        with _driver_errors("delete_one", collection_name):
            return await collection.delete_one(query, **(options or {}))

    async def delete_many(self, collection_name: str, query: Dict,
                          options: Optional[Dict] = None):
        collection = self.collection(collection_name)
        with _driver_errors("delete_many", collection_name):
            return await collection.delete_many(query, **(options or {}))

    async def update_one(self, collection_name: str, query: Dict, update: Dict,
                         options: Optional[Dict] = None):
        collection = self.collection(collection_name)
        with _driver_errors("update_one", collection_name):
            return await collection.update_one(query, update, **(options or {}))

    async def update_many(self, collection_name: str, query: Dict, update: Dict,
                          options: Optional[Dict] = None):
        collection = self.collection(collection_name)
        with _driver_errors("update_many", collection_name):
            return await collection.update_many(query, update, **(options or {}))

    async def count(self, collection_name: str, query: Dict, limit: Limit = False) -> int:
        """Count matching documents, stopping at limit when given"""
        collection = self.collection(collection_name)
        with _driver_errors("count_documents", collection_name):
            if limit:
                return await collection.count_documents(query, limit=_limit_count(limit))
            return await collection.count_documents(query)

    async def aggregate(self, collection_name: str, pipeline: List[Dict],
                        options: Optional[Dict] = None) -> List[Dict]:
        """Run an aggregation pipeline and materialize the results"""
        cursor = self.aggregate_cursor(collection_name, pipeline, options)
        with _driver_errors("aggregate", collection_name):
            return await cursor.to_list(length=None)

    def aggregate_cursor(self, collection_name: str, pipeline: List[Dict],
                         options: Optional[Dict] = None):
        """Lazy cursor over an aggregation pipeline"""
        collection = self.collection(collection_name)
        return collection.aggregate(pipeline, **(options or {}))

    async def create_index(self, collection_name: str, keys: Any,
                           options: Optional[Dict] = None) -> str:
        """Create an index, returning its name"""
        collection = self.collection(collection_name)
        with _driver_errors("create_index", collection_name):
            return await collection.create_index(keys, **(options or {}))

    async def stats(self, collection_name: str) -> Dict:
        """Storage statistics of a collection (collStats)"""
        database = self.connection.database
        with _driver_errors("collStats", collection_name):
            return await database.command("collStats", collection_name)
