# quiz_backend/api/endpoints/questions.py
from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from quiz_backend.db.deps import get_question_store
from quiz_backend.schemas.question import QuestionPublic, QuestionsInserted
from quiz_backend.services.question_store import QuestionStore
from quiz_backend.services.validation import validate_category, validate_questions

router = APIRouter(prefix="/questions", tags=["questions"])


@router.post(
    "",
    response_model=QuestionsInserted,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def add_questions(
    payload: Any = Body(None),
    store: QuestionStore = Depends(get_question_store),
):
    """
    Bulk insert. The body is a JSON array of questions; nothing is written
    unless every element passes validation.
    """
    questions = validate_questions(payload)
    inserted = await store.insert_many(questions)
    return {"message": "Questions inserted successfully.", "data": inserted}


@router.get(
    "/{category}",
    response_model=List[QuestionPublic],
    response_model_exclude_none=True,
)
async def list_questions_by_category(
    category: str,
    store: QuestionStore = Depends(get_question_store),
):
    validate_category(category)
    return await store.find_by_category(category)
