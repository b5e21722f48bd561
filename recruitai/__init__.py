"""
AI Recruitment Assistant
A questionnaire-driven job description generator with an AI proxy backend.

Architecture:
- FastAPI: thin proxy in front of an OpenAI-compatible chat-completion API
- SQLAlchemy: users, saved job descriptions and questionnaire drafts
- Typer CLI: terminal client that walks the questionnaire
"""

__version__ = "1.0.0"
