"""
AI Proxy Routes

POST /generate - Build a JD from questionnaire answers
POST /polish - Polish an existing JD with free-text instructions
POST /sourcing - Target companies and Boolean search strings for a JD

No authentication: these forward to the chat-completion API with the
server's key so the browser never holds it.
"""

from fastapi import APIRouter, Depends

from recruitai.core.errors import ValidationFailed
from recruitai.services.jd_service import JobDescriptionService
from recruitai.services.openai_client import OpenAIClient, get_ai_client
from recruitai.services.sourcing_service import SourcingService
from recruitai.schemas.schemas import (
    GenerateRequest, GenerateResponse, PolishRequest, TextResponse,
    SourcingRequest, SourcingResponse
)

router = APIRouter(tags=["AI"])


@router.post("/generate", response_model=GenerateResponse)
def generate(request: GenerateRequest, client: OpenAIClient = Depends(get_ai_client)):
    """Generate a generic, copy-paste-ready job description."""
    text, source = JobDescriptionService(client).generate_with_fallback(
        request.answers, model=request.model, fallback=request.fallback
    )
    return GenerateResponse(text=text, source=source)


@router.post("/polish", response_model=TextResponse)
def polish(request: PolishRequest, client: OpenAIClient = Depends(get_ai_client)):
    """Polish a JD. Accepts the text as either `jd` or `content`."""
    if not request.text.strip():
        raise ValidationFailed({"jd": "Job description text is required."})
    if not request.instructions.strip():
        raise ValidationFailed({"instructions": "Add what you want to polish."})

    text = JobDescriptionService(client).polish(request.text, request.instructions, model=request.model)
    return TextResponse(text=text)


@router.post("/sourcing", response_model=SourcingResponse)
def sourcing(request: SourcingRequest, client: OpenAIClient = Depends(get_ai_client)):
    """Generate a sourcing strategy for a JD and location."""
    if not request.jd.strip():
        raise ValidationFailed({"jd": "Job description text is required."})

    return SourcingService(client).generate(request.jd, request.location, model=request.model)
