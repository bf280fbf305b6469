# quiz_backend/api/endpoints/health.py
from fastapi import APIRouter, Depends

from quiz_backend.db.deps import get_question_store
from quiz_backend.services.question_store import QuestionStore

router = APIRouter(tags=["health"])


@router.get("/live")
def liveness_probe():
    return {"status": "ok"}


@router.get("/db")
async def db_health(store: QuestionStore = Depends(get_question_store)):
    await store.ping()
    return {"status": "ok"}
