import pytest

from quiz_backend.core.errors import (
    InvalidCategoryError,
    InvalidEnumError,
    InvalidFieldTypeError,
    InvalidPayloadError,
    MissingFieldError,
)
from quiz_backend.services.validation import validate_category, validate_questions
from tests.conftest import make_question


@pytest.mark.parametrize("payload", [None, [], {}, "questions", 3, make_question()])
def test_rejects_anything_but_non_empty_list(payload):
    with pytest.raises(InvalidPayloadError) as exc_info:
        validate_questions(payload)
    assert exc_info.value.message == "Request body must be a non-empty array of questions."
    assert exc_info.value.status_code == 400


@pytest.mark.parametrize(
    "field", ["question", "options", "answer", "category", "reference", "quizLevel"]
)
def test_missing_required_field(field):
    item = make_question()
    del item[field]
    with pytest.raises(MissingFieldError):
        validate_questions([make_question(), item])


@pytest.mark.parametrize("field,value", [("question", ""), ("options", []), ("answer", None)])
def test_falsy_required_field_counts_as_missing(field, value):
    with pytest.raises(MissingFieldError):
        validate_questions([make_question(**{field: value})])


def test_non_object_element_counts_as_missing():
    with pytest.raises(MissingFieldError):
        validate_questions([make_question(), "not a question"])


def test_hint_is_optional():
    payload = [make_question(), make_question(hint="add them")]
    assert validate_questions(payload) is payload


@pytest.mark.parametrize("level", ["l4", "L1", "easy"])
def test_unknown_quiz_level(level):
    with pytest.raises(InvalidEnumError) as exc_info:
        validate_questions([make_question(quizLevel=level)])
    assert exc_info.value.message == "Invalid quizLevel. Must be 'l1', 'l2', or 'l3'."


def test_unknown_category_in_payload():
    with pytest.raises(InvalidEnumError) as exc_info:
        validate_questions([make_question(category="se-xx")])
    assert "category" in exc_info.value.message


def test_first_bad_element_decides_error():
    payload = [make_question(quizLevel="l9"), {"question": "only this"}]
    with pytest.raises(InvalidEnumError):
        validate_questions(payload)


def test_returns_payload_unchanged():
    payload = [make_question(), make_question(category="se-ah", quizLevel="l3")]
    snapshot = [dict(q) for q in payload]
    assert validate_questions(payload) is payload
    assert payload == snapshot


def test_validate_category():
    assert validate_category("se-bh") == "se-bh"
    assert validate_category("se-ah") == "se-ah"
    for bad in ("bogus", "se-ae", "", None):
        with pytest.raises(InvalidCategoryError) as exc_info:
            validate_category(bad)
        assert exc_info.value.message == "Invalid category."


@pytest.mark.parametrize(
    "field,value",
    [
        ("question", 5),
        ("answer", ["4"]),
        ("reference", {"book": "arith"}),
        ("options", "3,4"),
        ("options", ["3", 4]),
        ("hint", 7),
    ],
)
def test_wrong_field_type(field, value):
    with pytest.raises(InvalidFieldTypeError) as exc_info:
        validate_questions([make_question(**{field: value})])
    assert field in exc_info.value.message
    assert exc_info.value.status_code == 400


def test_null_hint_is_allowed():
    validate_questions([make_question(hint=None)])
