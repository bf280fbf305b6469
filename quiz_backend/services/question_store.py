# quiz_backend/services/question_store.py
from __future__ import annotations

import logging
from typing import Any, List, Optional

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from quiz_backend.core.config import Settings
from quiz_backend.core.errors import PersistenceError
from quiz_backend.db.mongo import create_client, get_question_collection
from quiz_backend.schemas.question import QUESTION_FIELDS
from quiz_backend.services.validation import validate_category

logger = logging.getLogger(__name__)

PROJECTION = {field: 1 for field in QUESTION_FIELDS}


def _to_document(item: dict) -> dict:
    # Only declared fields are stored; a null hint is left out
    return {f: item[f] for f in QUESTION_FIELDS if item.get(f) is not None}


def _to_public(doc: dict) -> dict:
    out = {k: v for k, v in doc.items() if k != "_id"}
    out["id"] = str(doc["_id"])
    return out


class QuestionStore:
    """
    Questions collection in MongoDB.

    Inputs are trusted to be validated already. Every driver failure is
    re-raised as ``PersistenceError`` with the driver's message.
    """

    def __init__(self, collection: Any, client: Optional[AsyncMongoClient] = None):
        self._collection = collection
        self._client = client

    @classmethod
    async def connect(cls, settings: Settings) -> "QuestionStore":
        client = create_client(settings)
        try:
            await client.admin.command("ping")
            collection = await get_question_collection(client, settings)
        except PyMongoError as e:
            await client.close()
            raise PersistenceError(str(e)) from e
        logger.info(f"Connected to MongoDB collection {collection.full_name}")
        return cls(collection, client=client)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")

    async def ping(self) -> None:
        try:
            await self._collection.database.command("ping")
        except PyMongoError as e:
            raise PersistenceError(str(e)) from e

    async def insert_many(self, questions: List[dict]) -> List[dict]:
        documents = [_to_document(q) for q in questions]
        try:
            result = await self._collection.insert_many(documents, ordered=True)
        except PyMongoError as e:
            logger.error(f"Failed to insert {len(documents)} questions: {e}")
            raise PersistenceError(str(e)) from e

        for doc, inserted_id in zip(documents, result.inserted_ids):
            doc["_id"] = inserted_id
        logger.info(f"Inserted {len(documents)} questions")
        return [_to_public(doc) for doc in documents]

    async def find_by_category(self, category: str) -> List[dict]:
        validate_category(category)
        try:
            cursor = self._collection.find({"category": category}, PROJECTION)
            docs = await cursor.to_list(None)
        except PyMongoError as e:
            logger.error(f"Failed to read questions for category {category}: {e}")
            raise PersistenceError(str(e)) from e
        return [_to_public(doc) for doc in docs]
