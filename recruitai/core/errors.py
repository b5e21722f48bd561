"""
Application errors.

Every error raised by the service layer derives from RecruitAIError and
carries the HTTP status it maps to. The handler registered in main.py
renders them as {"error": message}.
"""

from typing import Dict, Optional


class RecruitAIError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class AIServiceError(RecruitAIError):
    """The chat-completion provider failed or is not configured."""
    status_code = 502


class RateLimitedError(RecruitAIError):
    status_code = 429

    def __init__(self, message: str = "Too many requests"):
        super().__init__(message)


class NotFoundError(RecruitAIError):
    status_code = 404


class ValidationFailed(RecruitAIError):
    """Form validation failed; `errors` maps field name -> message."""
    status_code = 422

    def __init__(self, errors: Dict[str, str], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = errors
