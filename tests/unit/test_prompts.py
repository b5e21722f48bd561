"""Unit tests for prompt construction."""

import pytest

from recruitai.services.prompts import (
    build_polish_prompt,
    build_prompt_from_answers,
    build_sourcing_prompt,
    sourcing_system_prompt,
)


@pytest.mark.unit
def test_required_lines_present_even_when_empty():
    prompt = build_prompt_from_answers({})
    assert prompt == "Job Role: \nLocation: \nEmployment type: "


@pytest.mark.unit
def test_optional_lines_follow_fixed_order():
    answers = {
        "applicationProcess": "Email resume",
        "role": "Data Analyst",
        "location": "Remote",
        "timezone": "EST (Eastern)",
        "hireType": "Contract",
        "duration": "6 months",
        "skills": "SQL, Python",
        "kpi": "Dashboards shipped",
    }
    lines = build_prompt_from_answers(answers).split("\n")
    assert lines == [
        "Job Role: Data Analyst",
        "Location: Remote",
        "Time zone: EST (Eastern)",
        "Employment type: Contract",
        "Contract duration: 6 months",
        "Key skills: SQL, Python",
        "KPIs: Dashboards shipped",
        "Application process: Email resume",
    ]


@pytest.mark.unit
def test_company_is_never_sent():
    prompt = build_prompt_from_answers({"role": "PM", "company": "Acme Corp"})
    assert "Acme" not in prompt
    assert "Company" not in prompt


@pytest.mark.unit
def test_sourcing_prompt_interpolates_location():
    prompt = sourcing_system_prompt("Austin, TX")
    assert "a role based in Austin, TX" in prompt
    assert '"software engineer" AND "Austin, TX"' in prompt
    assert '"diceSearch"' in prompt


@pytest.mark.unit
def test_user_messages():
    assert build_polish_prompt("JD", "shorter") == "Original JD:\n\nJD\n\nPolish instructions:\nshorter"
    assert build_sourcing_prompt("JD") == "Job Description:\n\nJD"
