# quiz_backend/services/validation.py
from typing import Any, List

from quiz_backend.core.errors import (
    InvalidCategoryError,
    InvalidEnumError,
    InvalidFieldTypeError,
    InvalidPayloadError,
    MissingFieldError,
)
from quiz_backend.schemas.question import CATEGORIES, QUIZ_LEVELS, REQUIRED_FIELDS

TEXT_FIELDS = ("question", "answer", "reference")


def _check_types(item: dict) -> None:
    for field in TEXT_FIELDS:
        if not isinstance(item[field], str):
            raise InvalidFieldTypeError(f"Invalid {field}. Must be a string.")
    options = item["options"]
    if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
        raise InvalidFieldTypeError("Invalid options. Must be an array of strings.")
    if item.get("hint") is not None and not isinstance(item["hint"], str):
        raise InvalidFieldTypeError("Invalid hint. Must be a string.")


def validate_questions(payload: Any) -> List[dict]:
    """
    Check a bulk-insert payload before it reaches the store.

    The payload must be a non-empty list; every element must carry a truthy
    value for each required field, text fields must be strings, ``options`` a
    list of strings, and ``quizLevel`` / ``category`` known values. The first
    offending element decides the error. Returns the payload unchanged.
    """
    if not isinstance(payload, list) or len(payload) == 0:
        raise InvalidPayloadError("Request body must be a non-empty array of questions.")

    for item in payload:
        if not isinstance(item, dict) or not all(item.get(f) for f in REQUIRED_FIELDS):
            raise MissingFieldError(
                "Each question must include question, options, answer, "
                "category, reference, and quizLevel fields."
            )
        _check_types(item)
        if item["quizLevel"] not in QUIZ_LEVELS:
            raise InvalidEnumError("Invalid quizLevel. Must be 'l1', 'l2', or 'l3'.")
        if item["category"] not in CATEGORIES:
            raise InvalidEnumError("Invalid category. Must be 'se-bh' or 'se-ah'.")

    return payload


def validate_category(category: Any) -> str:
    if category not in CATEGORIES:
        raise InvalidCategoryError("Invalid category.")
    return category
