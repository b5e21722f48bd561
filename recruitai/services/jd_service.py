"""
Job Description Service - generate, polish and template-build JDs.

Generation sends the questionnaire answers to the chat-completion API with
a prompt that asks for a generic, copy-paste-ready JD. When the provider is
unavailable the caller may opt into a deterministic template instead.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from recruitai.core.errors import AIServiceError
from recruitai.services import prompts
from recruitai.services.openai_client import OpenAIClient
from recruitai.utils.text import clean_for_hr

logger = logging.getLogger(__name__)

SOURCE_AI = "ai"
SOURCE_TEMPLATE = "template"

LIST_ANSWER_KEYS = ("skills", "benefits")

DEFAULT_BENEFITS = "• Competitive salary\n• Health insurance\n• Professional development opportunities"
DEFAULT_HOW_TO_APPLY = "Please submit your resume and cover letter to our HR department."
EEO_HEADING = "Equal Opportunity Employer"
EEO_STATEMENT = (
    "We are an equal opportunity employer and value diversity at our company. We do not "
    "discriminate on the basis of race, religion, color, national origin, gender, sexual "
    "orientation, age, marital status, veteran status, or disability status."
)


def normalize_answers(answers: Dict[str, Any]) -> Dict[str, Any]:
    """
    Prepare answers for the API: drop company information so the JD stays
    generic, and flatten list answers into comma-separated text.
    """
    normalized = dict(answers or {})
    normalized.pop("company", None)
    for key in LIST_ANSWER_KEYS:
        if isinstance(normalized.get(key), list):
            normalized[key] = ", ".join(str(item) for item in normalized[key])
    return normalized


def _bullets(value: Optional[str]) -> str:
    if not value:
        return ""
    return "• " + "\n• ".join(str(value).split("\n"))


def build_template_jd(answers: Dict[str, Any]) -> str:
    """Offline JD built straight from the answers."""
    answers = answers or {}
    role = answers.get("role") or ""
    location = answers.get("location") or ""
    domain = answers.get("domain")

    summary = f"We are seeking a {role or 'professional'} to join our team"
    summary += f" in {location}." if location else "."
    summary += f" This role focuses on {domain}." if domain else " "

    sections = [
        f"JOB TITLE: {role}",
        f"COMPANY: {answers['company']}" if answers.get("company") else "",
        f"LOCATION: {location}",
        f"TIME ZONE: {answers['timezone']}" if answers.get("timezone") else "",
        f"EMPLOYMENT TYPE: {answers.get('hireType') or ''}",
        f"CONTRACT DURATION: {answers['duration']}" if answers.get("duration") else "",
        "",
        "JOB SUMMARY",
        summary,
        "",
        "KEY RESPONSIBILITIES",
        _bullets(answers.get("goals")),
        "",
        "REQUIRED SKILLS",
        _bullets(answers.get("skills")),
        "",
        "PREFERRED QUALIFICATIONS",
        _bullets(answers.get("kpi")),
        "",
        "SUPERSTAR OUTCOMES",
        _bullets(answers.get("superstar")),
        "",
        "FIRST 90 DAYS",
        _bullets(answers.get("ninety")),
        "",
        "BENEFITS & PERKS",
        _bullets(answers.get("benefits")) or DEFAULT_BENEFITS,
        "",
        "HOW TO APPLY",
        answers.get("applicationProcess") or DEFAULT_HOW_TO_APPLY,
        "",
        EEO_HEADING,
        EEO_STATEMENT,
    ]
    return "\n".join(line for line in sections if line != "")


class JobDescriptionService:
    def __init__(self, client: OpenAIClient):
        self.client = client

    def generate(self, answers: Dict[str, Any], model: Optional[str] = None) -> str:
        user_prompt = prompts.build_prompt_from_answers(normalize_answers(answers))
        text = self.client.complete(
            prompts.GENERATE_SYSTEM_PROMPT,
            user_prompt,
            model=model,
            temperature=prompts.GENERATE_TEMPERATURE
        )
        return clean_for_hr(text)

    def generate_with_fallback(self, answers: Dict[str, Any], model: Optional[str] = None,
                               fallback: bool = False) -> Tuple[str, str]:
        """
        Returns (text, source). With `fallback` set, a provider failure
        yields the template JD instead of raising.
        """
        try:
            return self.generate(answers, model=model), SOURCE_AI
        except AIServiceError as e:
            if not fallback:
                raise
            logger.warning("JD generation failed, using template: %s", e)
            return build_template_jd(normalize_answers(answers)), SOURCE_TEMPLATE

    def polish(self, jd: str, instructions: str, model: Optional[str] = None) -> str:
        return self.client.complete(
            prompts.POLISH_SYSTEM_PROMPT,
            prompts.build_polish_prompt(jd, instructions),
            model=model,
            temperature=prompts.POLISH_TEMPERATURE
        )
