import copy

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from quiz_backend.core.errors import PersistenceError
from quiz_backend.db.deps import get_question_store
from quiz_backend.main import create_app
from quiz_backend.services.question_store import _to_document, _to_public


class InMemoryQuestionStore:
    """Stands in for QuestionStore without a MongoDB server."""

    def __init__(self):
        self.documents = []
        self.closed = False

    async def insert_many(self, questions):
        docs = [_to_document(q) for q in questions]
        for doc in docs:
            doc["_id"] = ObjectId()
        self.documents.extend(copy.deepcopy(docs))
        return [_to_public(doc) for doc in docs]

    async def find_by_category(self, category):
        return [_to_public(d) for d in self.documents if d["category"] == category]

    async def ping(self):
        return None

    async def close(self):
        self.closed = True


class FailingQuestionStore:
    def __init__(self, message="connection closed"):
        self.message = message

    async def insert_many(self, questions):
        raise PersistenceError(self.message)

    async def find_by_category(self, category):
        raise PersistenceError(self.message)

    async def ping(self):
        raise PersistenceError(self.message)


def make_question(**overrides):
    question = {
        "question": "2+2?",
        "options": ["3", "4"],
        "answer": "4",
        "category": "se-bh",
        "reference": "arith-101",
        "quizLevel": "l1",
    }
    question.update(overrides)
    return question


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store():
    return InMemoryQuestionStore()


def _client_for(store):
    app = create_app()
    app.dependency_overrides[get_question_store] = lambda: store
    # Not used as a context manager: the lifespan would connect to MongoDB
    return TestClient(app)


@pytest.fixture
def client(store):
    return _client_for(store)


@pytest.fixture
def failing_client():
    return _client_for(FailingQuestionStore())
