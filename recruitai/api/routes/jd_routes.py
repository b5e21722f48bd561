"""
Saved Job Description Routes

GET /jds - List my saved JDs (newest first)
POST /jds - Generate a JD from answers and save it
GET /jds/{jd_id} - Get a saved JD
DELETE /jds/{jd_id} - Delete a saved JD
POST /jds/{jd_id}/polish - Polish and overwrite a saved JD
GET /jds/{jd_id}/download - Download as a plain-text file
POST /jds/{jd_id}/sourcing - Sourcing strategy for a saved JD
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from recruitai.core.auth import get_current_user
from recruitai.core.errors import ValidationFailed
from recruitai.services.jd_service import JobDescriptionService
from recruitai.services.openai_client import OpenAIClient, get_ai_client
from recruitai.services.sourcing_service import SourcingService
from recruitai.services.storage_service import DraftStore, JobDescriptionStore
from recruitai.utils.text import attachment_disposition, to_filename, truncate
from recruitai.schemas.schemas import (
    GenerateRequest, JobDescriptionResponse, JobDescriptionListResponse,
    JobDescriptionPolishRequest, JobDescriptionSourcingRequest, SourcingResponse, MessageResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jds", tags=["Job Descriptions"])


@router.get("", response_model=JobDescriptionListResponse)
def list_job_descriptions(user: dict = Depends(get_current_user)):
    jds = JobDescriptionStore().list(user["id"])
    return JobDescriptionListResponse(
        job_descriptions=[JobDescriptionResponse(**jd, preview=truncate(jd["content"])) for jd in jds],
        total=len(jds)
    )


@router.post("", response_model=JobDescriptionResponse, status_code=201)
def create_job_description(
    request: GenerateRequest,
    user: dict = Depends(get_current_user),
    client: OpenAIClient = Depends(get_ai_client),
):
    """
    Generate a JD from questionnaire answers and save it.

    The user's questionnaire draft is cleared once the JD is stored.
    """
    text, source = JobDescriptionService(client).generate_with_fallback(
        request.answers, model=request.model, fallback=request.fallback
    )
    jd = JobDescriptionStore().save(
        owner_id=user["id"],
        title=str(request.answers.get("role") or ""),
        location=str(request.answers.get("location") or ""),
        content=text,
        answers=request.answers,
    )
    DraftStore().clear(user["id"])
    logger.info("Saved job description %s for %s (%s)", jd["id"], user["username"], source)
    return JobDescriptionResponse(**jd, source=source)


@router.get("/{jd_id}", response_model=JobDescriptionResponse)
def get_job_description(jd_id: str, user: dict = Depends(get_current_user)):
    return JobDescriptionResponse(**JobDescriptionStore().get(user["id"], jd_id))


@router.delete("/{jd_id}", response_model=MessageResponse)
def delete_job_description(jd_id: str, user: dict = Depends(get_current_user)):
    JobDescriptionStore().delete(user["id"], jd_id)
    return MessageResponse(message="Job description deleted successfully")


@router.post("/{jd_id}/polish", response_model=JobDescriptionResponse)
def polish_job_description(
    jd_id: str,
    request: JobDescriptionPolishRequest,
    user: dict = Depends(get_current_user),
    client: OpenAIClient = Depends(get_ai_client),
):
    """Polish a saved JD and overwrite its stored content."""
    if not request.instructions.strip():
        raise ValidationFailed({"instructions": "Add what you want to polish."})

    store = JobDescriptionStore()
    jd = store.get(user["id"], jd_id)
    polished = JobDescriptionService(client).polish(jd["content"], request.instructions, model=request.model)
    return JobDescriptionResponse(**store.update_content(user["id"], jd_id, polished))


@router.get("/{jd_id}/download", response_class=PlainTextResponse)
def download_job_description(jd_id: str, user: dict = Depends(get_current_user)):
    jd = JobDescriptionStore().get(user["id"], jd_id)
    filename = to_filename(jd["title"] or "job-description") + ".txt"
    return PlainTextResponse(
        jd["content"],
        headers={"Content-Disposition": attachment_disposition(filename)}
    )


@router.post("/{jd_id}/sourcing", response_model=SourcingResponse)
def source_job_description(
    jd_id: str,
    request: JobDescriptionSourcingRequest,
    user: dict = Depends(get_current_user),
    client: OpenAIClient = Depends(get_ai_client),
):
    """Sourcing strategy for a saved JD; location defaults to the JD's own."""
    jd = JobDescriptionStore().get(user["id"], jd_id)
    location = request.location if request.location is not None else jd["location"]
    return SourcingService(client).generate(jd["content"], location, model=request.model)
