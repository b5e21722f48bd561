"""
Sourcing Service - target companies and Boolean search strings for a JD.

The model is asked for strict JSON. Replies are cut down to the outermost
{...} before parsing, missing fields are filled in, and an unparseable
reply falls back to a sample strategy built from the location.
"""

import json
import logging
from typing import Any, Dict, Optional

from recruitai.services import prompts
from recruitai.services.openai_client import OpenAIClient

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY = "Sourcing strategy generated successfully."
FALLBACK_SUMMARY = "Fallback sourcing strategy generated. Please check your AI settings."


def _extract_json_object(text: str) -> str:
    text = text.strip()
    start = text.find("{")
    end = text.rfind("}") + 1
    if start != -1 and end > start:
        return text[start:end]
    return text


def _clean_company(company: Dict[str, Any]) -> Dict[str, str]:
    return {
        "name": str(company.get("name") or ""),
        "linkedinSearch": str(company.get("linkedinSearch") or ""),
        "reason": str(company.get("reason") or ""),
    }


def fallback_sourcing(location: str) -> Dict[str, Any]:
    return {
        "companies": [
            {
                "name": "Sample Company",
                "linkedinSearch": f'site:linkedin.com/in/ "Sample Company" AND "software developer" AND "{location}"',
                "reason": "Sample company with relevant talent",
            }
        ],
        "diceSearch": f'"{location}" AND "software developer" AND "full time"',
        "summary": FALLBACK_SUMMARY,
    }


def parse_sourcing_response(response: str, location: str) -> Dict[str, Any]:
    """
    Parse the model's sourcing reply into
    {"companies": [...], "diceSearch": str, "summary": str}.
    """
    try:
        parsed = json.loads(_extract_json_object(response or ""))
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning("Sourcing JSON parsing failed: %s; response was: %r", e, response)
        return fallback_sourcing(location)

    if not isinstance(parsed, dict):
        logger.warning("Sourcing response is not a JSON object: %r", response)
        return fallback_sourcing(location)

    companies = parsed.get("companies")
    if not isinstance(companies, list):
        companies = []
    return {
        "companies": [_clean_company(c) for c in companies if isinstance(c, dict)],
        "diceSearch": str(parsed.get("diceSearch") or ""),
        "summary": str(parsed.get("summary") or DEFAULT_SUMMARY),
    }


class SourcingService:
    def __init__(self, client: OpenAIClient):
        self.client = client

    def generate(self, jd: str, location: str, model: Optional[str] = None) -> Dict[str, Any]:
        response = self.client.complete(
            prompts.sourcing_system_prompt(location),
            prompts.build_sourcing_prompt(jd),
            model=model,
            temperature=prompts.SOURCING_TEMPERATURE
        )
        return parse_sourcing_response(response, location)
