from fastapi import APIRouter, Depends

from quiz_api.dependencies import get_quiz_store, require_token
from quiz_api.schemas.quiz import QuizCreate, QuizResponse
from quiz_api.services.quiz_store import QuizStore
from quiz_api.utils.exceptions import AppException, StoreError
from quiz_api.utils.response import message_response

router = APIRouter(prefix="/quiz", tags=["quiz"], dependencies=[Depends(require_token)])


@router.get("")
async def list_questions(store: QuizStore = Depends(get_quiz_store)):
    questions = await store.list_all()
    return [QuizResponse.model_validate(q).model_dump() for q in questions]


@router.post("", status_code=201)
async def add_question(payload: QuizCreate, store: QuizStore = Depends(get_quiz_store)):
    try:
        quiz = await store.create(payload.question, payload.choices, payload.correct)
    except StoreError as exc:
        raise AppException("Error adding question", status_code=400, error=exc.error or exc.message) from exc

    return message_response("Question added successfully!", id=quiz.id)


@router.delete("/{question_id}")
async def delete_question(question_id: str, store: QuizStore = Depends(get_quiz_store)):
    try:
        await store.delete_by_id(question_id)
    except StoreError as exc:
        raise AppException("Error deleting question", status_code=400, error=exc.error or exc.message) from exc

    return message_response("Question deleted successfully!")
