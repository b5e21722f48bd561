"""
Terminal client for the recruitment assistant.

Usage:
    recruitai serve
    recruitai questions
    recruitai interview --out senior-engineer.txt
    recruitai polish jd.txt --instructions "Shorter summary" --model gpt-4o
    recruitai sourcing jd.txt --location "Austin, TX"
    recruitai check
"""

from pathlib import Path
from typing import Any, Dict, Optional

import requests
import typer

from recruitai.core.config import get_settings
from recruitai.services.questionnaire import (
    AnswerRejected, QuestionnaireSession, SELECT, QUESTIONS
)

app = typer.Typer(help="AI recruitment assistant: job descriptions and sourcing strings.")

REQUEST_TIMEOUT = 120
MODEL_HELP = "Chat model (default from settings)"


def _post(path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """POST to the proxy server and return its JSON, exiting on failure."""
    url = get_settings().api_base_url.rstrip("/") + path
    try:
        response = requests.post(url, json=payload, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        typer.echo(f"ERROR: Could not reach {url}: {e}", err=True)
        raise typer.Exit(1)

    if not response.ok:
        try:
            message = response.json().get("error") or response.text
        except ValueError:
            message = response.text
        typer.echo(f"ERROR: HTTP {response.status_code}: {message}", err=True)
        raise typer.Exit(1)
    return response.json()


def _model(model: Optional[str]) -> str:
    return model or get_settings().default_model


def _ask(session: QuestionnaireSession) -> None:
    question = session.current()
    typer.echo(f"\n{session.progress}")
    typer.echo(question.q)
    if question.type == SELECT:
        typer.echo(f"  Options: {', '.join(question.options)}")
    elif question.suggestions:
        typer.echo(f"  Suggestions: {', '.join(question.suggestions)}")
    if question.is_list:
        typer.echo("  (separate items with commas)")

    value = typer.prompt(">", default="", show_default=False)
    if value.strip().lower() == ":back":
        session.back()
        return
    try:
        session.answer(value)
    except AnswerRejected as e:
        typer.echo(f"  {e}", err=True)


def _write_or_print(text: str, out: Optional[Path]) -> None:
    if out:
        out.write_text(text, encoding="utf-8")
        typer.echo(f"Saved to {out}")
    else:
        typer.echo(text)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind host (default from settings)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default from settings)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "recruitai.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@app.command()
def questions():
    """Print the questionnaire."""
    for number, question in enumerate(QUESTIONS, start=1):
        line = f"{number:2d}. [{question.key}] {question.q}"
        if question.condition is not None:
            line += "  (Contract hires only)"
        typer.echo(line)


@app.command()
def interview(
    fallback: bool = typer.Option(False, "--fallback", help="Use the offline template if the AI call fails"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write the JD to this file"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help=MODEL_HELP),
):
    """Walk the questionnaire and generate a job description. Type :back to go back."""
    session = QuestionnaireSession()
    while not session.is_complete:
        _ask(session)

    typer.echo("\nGenerating job description...")
    result = _post("/api/generate", {
        "answers": session.answers,
        "fallback": fallback,
        "model": _model(model),
    })
    if result.get("source") == "template":
        typer.echo("(AI unavailable: built from the offline template)", err=True)
    _write_or_print(result["text"], out)


@app.command()
def polish(
    jd_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Job description text file"),
    instructions: str = typer.Option(..., "--instructions", "-i", help="What to polish"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write the result to this file"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help=MODEL_HELP),
):
    """Polish an existing job description."""
    result = _post("/api/polish", {
        "jd": jd_file.read_text(encoding="utf-8"),
        "instructions": instructions,
        "model": _model(model),
    })
    _write_or_print(result["text"], out)


@app.command()
def sourcing(
    jd_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Job description text file"),
    location: str = typer.Option(..., "--location", "-l", help="Where the role is based"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help=MODEL_HELP),
):
    """Generate target companies and Boolean search strings."""
    result = _post("/api/sourcing", {
        "jd": jd_file.read_text(encoding="utf-8"),
        "location": location,
        "model": _model(model),
    })

    typer.echo(f"\n=== Summary ===\n{result.get('summary', '')}")
    typer.echo(f"\n=== Companies ({len(result.get('companies', []))}) ===")
    for company in result.get("companies", []):
        typer.echo(f"\n{company.get('name', '')}")
        typer.echo(f"  Why: {company.get('reason', '')}")
        typer.echo(f"  LinkedIn: {company.get('linkedinSearch', '')}")
    typer.echo(f"\n=== Dice ===\n{result.get('diceSearch', '')}")


@app.command()
def check():
    """Check the database and AI provider connections."""
    from recruitai.db.database import check_db_connection, init_db
    from recruitai.services.openai_client import get_ai_client

    settings = get_settings()
    typer.echo("=" * 50)
    typer.echo("AI RECRUITMENT ASSISTANT - CONNECTION CHECK")
    typer.echo("=" * 50)

    typer.echo("\n[1] Database...")
    typer.echo(f"    URL: {settings.database_url}")
    ok = True
    if check_db_connection():
        init_db()
        typer.echo("    Database: CONNECTED")
    else:
        typer.echo("    Database: FAILED")
        ok = False

    typer.echo("\n[2] Chat-completion API...")
    if settings.openai_api_key:
        typer.echo(f"    Base URL: {settings.openai_base_url}")
        if get_ai_client().test_connection():
            typer.echo("    API: CONNECTED")
        else:
            typer.echo("    API: FAILED")
            ok = False
    else:
        typer.echo("    API: OPENAI_API_KEY not configured")
        ok = False

    if not ok:
        raise typer.Exit(1)


def main():
    app()


if __name__ == "__main__":
    main()
