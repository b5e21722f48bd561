"""
Account Service - signup validation, registration and login.
"""

import logging
from typing import Dict, Optional

from email_validator import EmailNotValidError, validate_email

from recruitai.core.errors import ValidationFailed
from recruitai.core.security import hash_password, validate_password_strength, verify_password
from recruitai.services.storage_service import UserService

logger = logging.getLogger(__name__)


def is_valid_email(email: Optional[str]) -> bool:
    """Syntax check only; the domain is not looked up."""
    try:
        validate_email(email or "", check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_signup(fields: Dict[str, str], users: Optional[UserService] = None) -> Dict[str, str]:
    """Return field -> message for every problem with a signup form."""
    users = users or UserService()
    errors: Dict[str, str] = {}

    if not fields.get("first"):
        errors["first"] = "First name is required."
    if not fields.get("last"):
        errors["last"] = "Last name is required."
    if not fields.get("username"):
        errors["username"] = "Username is required."
    if not fields.get("email"):
        errors["email"] = "Email is required."
    elif not is_valid_email(fields["email"]):
        errors["email"] = "Please enter a valid email."

    if not fields.get("password"):
        errors["password"] = "Password is required."
    else:
        report = validate_password_strength(fields["password"])
        if not report["is_valid"]:
            errors["password"] = ". ".join(report["errors"])

    if fields.get("username") and users.username_taken(fields["username"]):
        errors["username"] = "Username already taken."
    if fields.get("email") and "email" not in errors and users.email_taken(fields["email"]):
        errors["email"] = "Email address already registered."

    return errors


def validate_login(credentials: Dict[str, str]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not credentials.get("username"):
        errors["username"] = "Username is required."
    if not credentials.get("password"):
        errors["password"] = "Password is required."
    return errors


class AccountService:
    def __init__(self, users: Optional[UserService] = None):
        self.users = users or UserService()

    def register(self, first: str, last: str, username: str, email: str, password: str) -> dict:
        fields = {
            "first": (first or "").strip(),
            "last": (last or "").strip(),
            "username": (username or "").strip(),
            "email": (email or "").strip(),
            "password": password or "",
        }
        errors = validate_signup(fields, self.users)
        if errors:
            raise ValidationFailed(errors)

        user = self.users.create(
            first=fields["first"],
            last=fields["last"],
            username=fields["username"],
            email=fields["email"],
            password_hash=hash_password(fields["password"]),
        )
        logger.info("Registered user %s", user["username"])
        return user

    def authenticate(self, username: str, password: str) -> Optional[dict]:
        """Return the user for a valid username/password pair, else None."""
        errors = validate_login({"username": username, "password": password})
        if errors:
            raise ValidationFailed(errors)
        user = self.users.get_by_username(username.strip())
        if user is None or not verify_password(password, user["password_hash"]):
            return None
        return user
