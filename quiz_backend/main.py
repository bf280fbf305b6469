# quiz_backend/main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from quiz_backend.api.endpoints import health, questions
from quiz_backend.core.config import Settings, settings
from quiz_backend.core.errors import PersistenceError, QuizBackendError
from quiz_backend.core.logging_config import configure_logging
from quiz_backend.services.question_store import QuestionStore

logger = logging.getLogger(__name__)


async def quiz_error_handler(request: Request, exc: QuizBackendError):
    if isinstance(exc, PersistenceError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Only malformed bodies end up here; field rules are checked by the validator
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request.") if errors else "Invalid request."
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error."},
    )


def create_app(config: Settings = settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.question_store = await QuestionStore.connect(config)
        yield
        await app.state.question_store.close()

    configure_logging(config.LOG_LEVEL)

    app = FastAPI(title=config.PROJECT_NAME, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(QuizBackendError, quiz_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/", response_class=PlainTextResponse, tags=["health"])
    def root():
        return "Quiz Backend API is running!"

    app.include_router(questions.router, prefix="/api")
    app.include_router(health.router, prefix="/health")
    return app


app = create_app()


def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
