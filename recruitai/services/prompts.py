"""
Prompt templates for the chat-completion API.

Three tasks: generate a JD from questionnaire answers, polish an existing
JD, and produce a sourcing strategy (target companies plus Boolean search
strings) for a JD.
"""

from typing import Any, Dict

GENERATE_TEMPERATURE = 0.3
POLISH_TEMPERATURE = 0.2
SOURCING_TEMPERATURE = 0.3

GENERATE_SYSTEM_PROMPT = """You are a professional HR assistant. Create a generic job description that HR can directly copy-paste into any system (ATS, job boards, company websites).

Requirements:
- Clean, professional formatting with NO markdown or special characters
- Use clear headings: Job Title, Location, Job Summary, Key Responsibilities, Required Skills, Preferred Qualifications, Benefits & Perks, How to Apply
- Do NOT include company name or company-specific information - keep it completely generic
- Convert lists to clean bullet points
- Professional, engaging tone
- ATS-friendly structure
- Include all provided information
- Ready for immediate use by any HR professional at any company"""

POLISH_SYSTEM_PROMPT = (
    "You are a meticulous recruiter editor. Improve clarity, grammar, flow, and impact. "
    "Keep structure and bullet points. Do not invent facts; only refine based on the "
    "user's instructions."
)

SOURCING_SYSTEM_TEMPLATE = """You are a recruiter who has just completed an intake meeting and has a detailed job description for a role based in {location}. Your next task is to identify potential candidates for this role. Follow these steps:

1. Based on the job description scoped above, identify 10 top companies known for having talent with relevant skills and experience for this role.

2. Generate a specific Boolean search string for each identified company to use in LinkedIn searches. CRITICAL: Each LinkedIn search string MUST include the specific company name to target candidates from that exact company. The goal is to find LinkedIn profiles of potential candidates who could fit this role well and work at the specific company.

3. Also create a Boolean string to search in Dice job portal.

IMPORTANT: You must respond with ONLY valid JSON in this exact format:
{{
  "companies": [
    {{
      "name": "Company Name",
      "linkedinSearch": "Boolean search string for LinkedIn that includes the company name",
      "reason": "Why this company has relevant talent"
    }}
  ],
  "diceSearch": "Boolean search string for Dice job portal",
  "summary": "Brief summary of sourcing strategy"
}}

EXAMPLES of proper LinkedIn search strings:
- For Google: site:linkedin.com/in/ ("Google" OR "Alphabet") AND "software engineer" AND "{location}"
- For Microsoft: site:linkedin.com/in/ "Microsoft" AND "data scientist" AND "{location}"
- For Amazon: site:linkedin.com/in/ "Amazon" AND "product manager" AND "{location}"

Do not include any text before or after the JSON."""

# (answer key, label) for optional lines after the employment type, in output order
OPTIONAL_ANSWER_LINES = [
    ("duration", "Contract duration"),
    ("domain", "Domain preference"),
    ("skills", "Key skills"),
    ("goals", "1-year success goals"),
    ("kpi", "KPIs"),
    ("superstar", "Superstar outcomes"),
    ("ninety", "First 90 days"),
    ("benefits", "Benefits and perks"),
    ("applicationProcess", "Application process"),
]


def build_prompt_from_answers(answers: Dict[str, Any]) -> str:
    """
    Turn questionnaire answers into the user message for JD generation.

    Role, location and employment type are always present (possibly empty);
    the rest only when answered. Company is never sent.
    """
    answers = answers or {}
    lines = [f"Job Role: {answers.get('role') or ''}"]
    lines.append(f"Location: {answers.get('location') or ''}")
    if answers.get("timezone"):
        lines.append(f"Time zone: {answers['timezone']}")
    lines.append(f"Employment type: {answers.get('hireType') or ''}")
    for key, label in OPTIONAL_ANSWER_LINES:
        if answers.get(key):
            lines.append(f"{label}: {answers[key]}")
    return "\n".join(lines)


def build_polish_prompt(jd: str, instructions: str) -> str:
    return f"Original JD:\n\n{jd}\n\nPolish instructions:\n{instructions}"


def sourcing_system_prompt(location: str) -> str:
    return SOURCING_SYSTEM_TEMPLATE.format(location=location)


def build_sourcing_prompt(jd: str) -> str:
    return f"Job Description:\n\n{jd}"
