"""Unit tests for sourcing reply parsing."""

import json

import pytest

from recruitai.services.sourcing_service import (
    DEFAULT_SUMMARY,
    FALLBACK_SUMMARY,
    SourcingService,
    parse_sourcing_response,
)


@pytest.mark.unit
def test_parses_json_wrapped_in_prose():
    reply = 'Here you go:\n```json\n{"companies": [{"name": "Acme", "linkedinSearch": "site:linkedin.com/in/ \\"Acme\\"", "reason": "Fintech"}], "diceSearch": "\\"Python\\"", "summary": "Go wide"}\n```'
    result = parse_sourcing_response(reply, "Remote")
    assert result["companies"] == [
        {"name": "Acme", "linkedinSearch": 'site:linkedin.com/in/ "Acme"', "reason": "Fintech"}
    ]
    assert result["diceSearch"] == '"Python"'
    assert result["summary"] == "Go wide"


@pytest.mark.unit
def test_missing_fields_get_defaults():
    result = parse_sourcing_response('{"companies": "none"}', "Remote")
    assert result == {"companies": [], "diceSearch": "", "summary": DEFAULT_SUMMARY}


@pytest.mark.unit
def test_non_dict_companies_are_dropped():
    reply = json.dumps({"companies": [{"name": "Acme"}, "Globex", None]})
    result = parse_sourcing_response(reply, "Remote")
    assert result["companies"] == [{"name": "Acme", "linkedinSearch": "", "reason": ""}]


@pytest.mark.unit
@pytest.mark.parametrize("reply", ["not json at all", "", "{broken", "[1, 2]"])
def test_unparseable_reply_falls_back(reply):
    result = parse_sourcing_response(reply, "Denver, CO")
    assert result["summary"] == FALLBACK_SUMMARY
    assert result["companies"][0]["name"] == "Sample Company"
    assert '"Denver, CO"' in result["companies"][0]["linkedinSearch"]
    assert result["diceSearch"] == '"Denver, CO" AND "software developer" AND "full time"'


@pytest.mark.unit
def test_service_sends_location_in_system_prompt():
    class Client:
        def __init__(self):
            self.calls = []

        def complete(self, system_prompt, user_content, model=None, temperature=0.3):
            self.calls.append((system_prompt, user_content, model, temperature))
            return '{"companies": [], "diceSearch": "x", "summary": "y"}'

    client = Client()
    result = SourcingService(client).generate("JD text", "Boston, MA", model="gpt-4o")
    system_prompt, user_content, model, temperature = client.calls[0]
    assert "based in Boston, MA" in system_prompt
    assert user_content == "Job Description:\n\nJD text"
    assert model == "gpt-4o"
    assert temperature == 0.3
    assert result["diceSearch"] == "x"
