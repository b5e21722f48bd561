"""
Password security utilities.

Provides:
- Password hashing with bcrypt (passlib, SHA-256 prehash)
- Password strength validation and scoring
- Random password generation
"""

import re
import secrets
from typing import Any, Dict, List

from passlib.context import CryptContext

# Password hashing. bcrypt only reads the first 72 bytes, so new hashes
# go through bcrypt_sha256; plain bcrypt hashes still verify.
pwd_context = CryptContext(schemes=["bcrypt_sha256", "bcrypt"], deprecated="auto")

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128

SPECIAL_CHARS = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")

COMMON_PASSWORDS = {
    "password",
    "123456",
    "password123",
    "admin",
    "qwerty",
    "letmein",
    "welcome",
    "monkey",
    "1234567890",
    "abc123",
}

GENERATOR_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789!@#$%^&*"


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


def calculate_password_strength(password: str) -> int:
    """Score a password from 0 to 100."""
    score = 0

    if len(password) >= 8:
        score += 20
    if len(password) >= 12:
        score += 10
    if len(password) >= 16:
        score += 10

    if re.search(r"[a-z]", password):
        score += 10
    if re.search(r"[A-Z]", password):
        score += 10
    if re.search(r"[0-9]", password):
        score += 10
    if SPECIAL_CHARS.search(password):
        score += 15

    # Repeated characters and keyboard/alphabet runs
    if re.search(r"(.)\1{2,}", password):
        score -= 10
    if re.search(r"123|abc|qwe", password, re.IGNORECASE):
        score -= 15

    return max(0, min(100, score))


def validate_password_strength(password: str) -> Dict[str, Any]:
    """
    Check a password against the signup rules.

    Returns:
        {"is_valid": bool, "errors": [str], "strength": int}
    """
    errors: List[str] = []

    if not password:
        return {"is_valid": False, "errors": ["Password is required"], "strength": 0}

    if len(password) < MIN_PASSWORD_LENGTH:
        errors.append("Password must be at least 8 characters long")
    if len(password) > MAX_PASSWORD_LENGTH:
        errors.append("Password must be less than 128 characters")
    if not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")
    if not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")
    if not re.search(r"[0-9]", password):
        errors.append("Password must contain at least one number")
    if not SPECIAL_CHARS.search(password):
        errors.append("Password must contain at least one special character")
    if password.lower() in COMMON_PASSWORDS:
        errors.append("Password is too common. Please choose a stronger password")

    return {
        "is_valid": not errors,
        "errors": errors,
        "strength": calculate_password_strength(password),
    }


def generate_secure_password(length: int = 16) -> str:
    return "".join(secrets.choice(GENERATOR_CHARSET) for _ in range(length))
