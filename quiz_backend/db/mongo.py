# quiz_backend/db/mongo.py
import logging

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from quiz_backend.core.config import Settings
from quiz_backend.core.errors import ConfigurationError
from quiz_backend.schemas.question import CATEGORIES, QUIZ_LEVELS, REQUIRED_FIELDS

logger = logging.getLogger(__name__)

QUESTION_SCHEMA = {
    "$jsonSchema": {
        "bsonType": "object",
        "required": list(REQUIRED_FIELDS),
        "properties": {
            "question": {"bsonType": "string", "minLength": 1},
            "options": {
                "bsonType": "array",
                "minItems": 1,
                "items": {"bsonType": "string"},
            },
            "answer": {"bsonType": "string"},
            "hint": {"bsonType": "string"},
            "category": {"enum": CATEGORIES},
            "reference": {"bsonType": "string"},
            "quizLevel": {"enum": QUIZ_LEVELS},
        },
    }
}


def create_client(settings: Settings) -> AsyncMongoClient:
    if not settings.MONGO_URI:
        raise ConfigurationError("MONGO_URI is not set")
    return AsyncMongoClient(
        settings.MONGO_URI,
        serverSelectionTimeoutMS=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
    )


async def get_question_collection(
    client: AsyncMongoClient, settings: Settings
) -> AsyncCollection:
    """
    Resolve the questions collection, creating it if needed.

    With ``MONGO_APPLY_SCHEMA`` the collection validator is (re)installed so
    the database rejects documents that break the question schema.
    """
    db = client.get_default_database(default=settings.MONGO_DB_NAME)
    name = settings.MONGO_COLLECTION

    existing = await db.list_collection_names(filter={"name": name})
    if settings.MONGO_APPLY_SCHEMA:
        if name in existing:
            await db.command("collMod", name, validator=QUESTION_SCHEMA)
        else:
            await db.create_collection(name, validator=QUESTION_SCHEMA)
        logger.info(f"Installed question schema on {db.name}.{name}")

    collection = db[name]
    await collection.create_index([("category", ASCENDING)])
    return collection
