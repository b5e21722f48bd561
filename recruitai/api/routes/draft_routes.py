"""
Questionnaire Draft Routes

GET /drafts - Load my in-progress questionnaire
PUT /drafts - Save (overwrite) it
DELETE /drafts - Discard it
"""

from fastapi import APIRouter, Depends

from recruitai.core.auth import get_current_user
from recruitai.core.errors import NotFoundError
from recruitai.services.questionnaire import QuestionnaireSession
from recruitai.services.storage_service import DraftStore
from recruitai.schemas.schemas import DraftRequest, DraftResponse, MessageResponse

router = APIRouter(prefix="/drafts", tags=["Drafts"])


def _draft_response(draft: dict) -> DraftResponse:
    session = QuestionnaireSession.from_dict(draft)
    return DraftResponse(
        step=draft["step"],
        answers=draft["answers"],
        updated_at=draft["updated_at"],
        progress=session.progress
    )


@router.get("", response_model=DraftResponse)
def load_draft(user: dict = Depends(get_current_user)):
    draft = DraftStore().load(user["id"])
    if draft is None:
        raise NotFoundError("No saved draft")
    return _draft_response(draft)


@router.put("", response_model=DraftResponse)
def save_draft(request: DraftRequest, user: dict = Depends(get_current_user)):
    draft = DraftStore().save(user["id"], request.step, request.answers)
    return _draft_response(draft)


@router.delete("", response_model=MessageResponse)
def clear_draft(user: dict = Depends(get_current_user)):
    DraftStore().clear(user["id"])
    return MessageResponse(message="Draft cleared")
