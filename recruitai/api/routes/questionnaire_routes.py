"""
Questionnaire Routes

GET /questions - Questions that apply to the current answers
POST /questions/validate - Check a single answer
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from recruitai.services.questionnaire import get_question, validate_answer, visible_questions
from recruitai.schemas.schemas import (
    AnswerCheckRequest, AnswerCheckResponse, QuestionListResponse, QuestionResponse
)

router = APIRouter(prefix="/questions", tags=["Questionnaire"])


@router.get("", response_model=QuestionListResponse)
async def list_questions(hireType: Optional[str] = Query(None, description="Employment type answered so far")):
    """List questions; contract duration only appears for Contract hires."""
    answers = {"hireType": hireType} if hireType else {}
    questions = [QuestionResponse(**q.to_dict()) for q in visible_questions(answers)]
    return QuestionListResponse(questions=questions, total=len(questions))


@router.post("/validate", response_model=AnswerCheckResponse)
async def check_answer(request: AnswerCheckRequest):
    try:
        question = get_question(request.key)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown question: {request.key}")

    value, error = validate_answer(question, request.value)
    return AnswerCheckResponse(ok=error is None, value=value, error=error)
