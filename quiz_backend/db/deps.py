# quiz_backend/db/deps.py
from fastapi import Request

from quiz_backend.services.question_store import QuestionStore


def get_question_store(request: Request) -> QuestionStore:
    # Created in the app lifespan, one per process
    return request.app.state.question_store
