# quiz_backend/schemas/question.py
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    SE_BH = "se-bh"
    SE_AH = "se-ah"


class QuizLevel(str, Enum):
    L1 = "l1"  # easy
    L2 = "l2"  # intermediate
    L3 = "l3"  # hard


CATEGORIES = [c.value for c in Category]
QUIZ_LEVELS = [lvl.value for lvl in QuizLevel]

REQUIRED_FIELDS = ("question", "options", "answer", "category", "reference", "quizLevel")
QUESTION_FIELDS = REQUIRED_FIELDS + ("hint",)


class QuestionBase(BaseModel):
    question: str
    options: List[str]
    answer: str
    hint: str | None = None
    category: Category
    reference: str
    quizLevel: QuizLevel


class QuestionPublic(QuestionBase):
    # Stored under ``_id``; exposed on the wire under the same name
    id: str = Field(serialization_alias="_id")

    model_config = ConfigDict(use_enum_values=True)


class QuestionsInserted(BaseModel):
    message: str
    data: List[QuestionPublic]
