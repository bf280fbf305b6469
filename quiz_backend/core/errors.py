# quiz_backend/core/errors.py
from fastapi import status


class QuizBackendError(Exception):
    """Base error; ``message`` is what the client sees under ``error``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPayloadError(QuizBackendError):
    status_code = status.HTTP_400_BAD_REQUEST


class MissingFieldError(QuizBackendError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidEnumError(QuizBackendError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidCategoryError(QuizBackendError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidFieldTypeError(QuizBackendError):
    status_code = status.HTTP_400_BAD_REQUEST


class PersistenceError(QuizBackendError):
    pass


class ConfigurationError(QuizBackendError):
    pass
