"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Any, Dict


# ============================================================
# AI PROXY SCHEMAS
# ============================================================

class GenerateRequest(BaseModel):
    answers: Dict[str, Any] = {}
    model: Optional[str] = None
    fallback: bool = False

class GenerateResponse(BaseModel):
    text: str
    source: str = "ai"

class PolishRequest(BaseModel):
    jd: Optional[str] = None
    content: Optional[str] = None
    instructions: str = ""
    model: Optional[str] = None

    @property
    def text(self) -> str:
        return self.jd if self.jd is not None else (self.content or "")

class TextResponse(BaseModel):
    text: str

class SourcingRequest(BaseModel):
    jd: str = ""
    location: str = ""
    model: Optional[str] = None

class SourcingCompany(BaseModel):
    name: str = ""
    linkedinSearch: str = ""
    reason: str = ""

class SourcingResponse(BaseModel):
    companies: List[SourcingCompany] = []
    diceSearch: str = ""
    summary: str = ""


# ============================================================
# QUESTIONNAIRE SCHEMAS
# ============================================================

class QuestionResponse(BaseModel):
    key: str
    q: str
    type: str
    placeholder: str = ""
    suggestions: List[str] = []
    options: List[str] = []
    is_list: bool = False

class QuestionListResponse(BaseModel):
    questions: List[QuestionResponse]
    total: int

class AnswerCheckRequest(BaseModel):
    key: str
    value: Any = None

class AnswerCheckResponse(BaseModel):
    ok: bool
    value: Any = None
    error: Optional[str] = None


# ============================================================
# AUTH SCHEMAS
# ============================================================

class SignupRequest(BaseModel):
    first: str = ""
    last: str = ""
    username: str = ""
    email: str = ""
    password: str = ""

class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    username: str

class UserResponse(BaseModel):
    id: str
    first: str
    last: str
    username: str
    email: str
    created_at: str

class PasswordCheckRequest(BaseModel):
    password: str = ""

class PasswordStrengthResponse(BaseModel):
    is_valid: bool
    errors: List[str]
    strength: int

class GeneratedPasswordResponse(BaseModel):
    password: str


# ============================================================
# JOB DESCRIPTION SCHEMAS
# ============================================================

class JobDescriptionResponse(BaseModel):
    id: str
    title: str
    location: str = ""
    content: str
    answers: Dict[str, Any] = {}
    created_at: str
    updated_at: str
    source: Optional[str] = None
    preview: Optional[str] = None

class JobDescriptionListResponse(BaseModel):
    job_descriptions: List[JobDescriptionResponse]
    total: int

class JobDescriptionPolishRequest(BaseModel):
    instructions: str = ""
    model: Optional[str] = None

class JobDescriptionSourcingRequest(BaseModel):
    location: Optional[str] = None
    model: Optional[str] = None


# ============================================================
# DRAFT SCHEMAS
# ============================================================

class DraftRequest(BaseModel):
    step: int = Field(0, ge=0)
    answers: Dict[str, Any] = {}

class DraftResponse(BaseModel):
    step: int
    answers: Dict[str, Any]
    updated_at: str
    progress: str


# ============================================================
# DASHBOARD SCHEMAS
# ============================================================

class DashboardStatsResponse(BaseModel):
    job_descriptions: int
    active_tools: int = 2
    coming_soon: int = 3


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True
