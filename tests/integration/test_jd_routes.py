"""Integration tests for saved JDs, drafts and dashboard stats."""

import pytest

ANSWERS = {
    "role": "Senior Data Engineer",
    "location": "Austin, TX",
    "hireType": "Full-time",
    "skills": ["Spark", "SQL"],
}


def _create(client, headers, answers=ANSWERS, **extra):
    response = client.post("/api/jds", json={"answers": answers, **extra}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.integration
def test_jds_require_auth(client):
    assert client.get("/api/jds").status_code == 401
    assert client.post("/api/jds", json={"answers": ANSWERS}).status_code == 401


@pytest.mark.integration
def test_create_and_list_newest_first(client, auth_headers, fake_ai):
    fake_ai.replies = ["First JD", "Second JD"]
    first = _create(client, auth_headers)
    second = _create(client, auth_headers, answers={**ANSWERS, "role": "Analyst"})

    assert first["title"] == "Senior Data Engineer"
    assert first["location"] == "Austin, TX"
    assert first["content"] == "First JD"
    assert first["answers"]["skills"] == ["Spark", "SQL"]
    assert first["source"] == "ai"

    response = client.get("/api/jds", headers=auth_headers)
    body = response.json()
    assert body["total"] == 2
    assert [jd["id"] for jd in body["job_descriptions"]] == [second["id"], first["id"]]
    assert body["job_descriptions"][0]["preview"] == "Second JD"


@pytest.mark.integration
def test_jds_are_scoped_to_owner(client, auth_headers, login):
    jd = _create(client, auth_headers)
    other = login(username="other", email="other@example.com")

    assert client.get(f"/api/jds/{jd['id']}", headers=other).status_code == 404
    assert client.delete(f"/api/jds/{jd['id']}", headers=other).status_code == 404
    assert client.get("/api/jds", headers=other).json()["total"] == 0
    assert client.get(f"/api/jds/{jd['id']}", headers=auth_headers).status_code == 200


@pytest.mark.integration
def test_polish_overwrites_content(client, auth_headers, fake_ai):
    fake_ai.replies = ["Original", "Polished"]
    jd = _create(client, auth_headers)

    response = client.post(f"/api/jds/{jd['id']}/polish", json={"instructions": "Tighten"},
                           headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["content"] == "Polished"
    assert "Original JD:\n\nOriginal" in fake_ai.calls[1]["user"]

    stored = client.get(f"/api/jds/{jd['id']}", headers=auth_headers).json()
    assert stored["content"] == "Polished"


@pytest.mark.integration
def test_polish_requires_instructions(client, auth_headers):
    jd = _create(client, auth_headers)
    response = client.post(f"/api/jds/{jd['id']}/polish", json={"instructions": ""},
                           headers=auth_headers)
    assert response.status_code == 422


@pytest.mark.integration
def test_download_as_text_file(client, auth_headers, fake_ai):
    fake_ai.replies = ["JD body"]
    jd = _create(client, auth_headers)

    response = client.get(f"/api/jds/{jd['id']}/download", headers=auth_headers)
    assert response.status_code == 200
    assert response.text == "JD body"
    assert response.headers["content-type"].startswith("text/plain")
    assert 'filename="Senior-Data-Engineer.txt"' in response.headers["content-disposition"]


@pytest.mark.integration
def test_download_non_ascii_title(client, auth_headers, fake_ai):
    fake_ai.replies = ["JD body"]
    jd = _create(client, auth_headers, answers={**ANSWERS, "role": "Senior Engineer – Platform"})

    response = client.get(f"/api/jds/{jd['id']}/download", headers=auth_headers)
    assert response.status_code == 200
    assert response.text == "JD body"
    disposition = response.headers["content-disposition"]
    assert 'filename="Senior-Engineer--Platform.txt"' in disposition
    assert "filename*=UTF-8''Senior-Engineer-%E2%80%93-Platform.txt" in disposition


@pytest.mark.integration
def test_sourcing_defaults_to_saved_location(client, auth_headers, fake_ai):
    fake_ai.replies = ["JD body", '{"companies": [], "diceSearch": "d", "summary": "s"}']
    jd = _create(client, auth_headers)

    response = client.post(f"/api/jds/{jd['id']}/sourcing", json={}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["diceSearch"] == "d"
    assert "based in Austin, TX" in fake_ai.calls[1]["system"]


@pytest.mark.integration
def test_delete(client, auth_headers):
    jd = _create(client, auth_headers)
    assert client.delete(f"/api/jds/{jd['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/jds/{jd['id']}", headers=auth_headers).status_code == 404
    assert client.delete(f"/api/jds/{jd['id']}", headers=auth_headers).json() == {
        "error": "Job description not found"
    }


@pytest.mark.integration
def test_generation_failure_saves_nothing(client, auth_headers, fake_ai):
    fake_ai.fail_with()
    response = client.post("/api/jds", json={"answers": ANSWERS}, headers=auth_headers)
    assert response.status_code == 502
    assert client.get("/api/jds", headers=auth_headers).json()["total"] == 0


@pytest.mark.integration
def test_draft_lifecycle(client, auth_headers):
    assert client.get("/api/drafts", headers=auth_headers).status_code == 404

    response = client.put("/api/drafts", json={"step": 1, "answers": {"role": "PM"}}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["progress"] == "Question 2 of 12"

    client.put("/api/drafts", json={"step": 4, "answers": {"role": "PM", "hireType": "Contract"}},
               headers=auth_headers)
    draft = client.get("/api/drafts", headers=auth_headers).json()
    assert draft["step"] == 4
    assert draft["answers"] == {"role": "PM", "hireType": "Contract"}
    assert draft["progress"] == "Question 5 of 13"

    assert client.delete("/api/drafts", headers=auth_headers).status_code == 200
    assert client.get("/api/drafts", headers=auth_headers).status_code == 404


@pytest.mark.integration
def test_saving_jd_clears_draft(client, auth_headers):
    client.put("/api/drafts", json={"step": 2, "answers": {"role": "PM"}}, headers=auth_headers)
    _create(client, auth_headers)
    assert client.get("/api/drafts", headers=auth_headers).status_code == 404


@pytest.mark.integration
def test_dashboard_stats(client, auth_headers):
    _create(client, auth_headers)
    _create(client, auth_headers)
    response = client.get("/api/dashboard/stats", headers=auth_headers)
    assert response.json() == {"job_descriptions": 2, "active_tools": 2, "coming_soon": 3}
