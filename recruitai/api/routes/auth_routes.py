"""
Authentication Routes

POST /auth/signup - Register new user
POST /auth/login - Login and get JWT token
GET /auth/me - Get current user info
POST /auth/password-strength - Score a candidate password
GET /auth/generate-password - Suggest a strong random password
"""

from fastapi import APIRouter, HTTPException, Depends, Query

from recruitai.core.auth import create_access_token, get_current_user
from recruitai.core.security import generate_secure_password, validate_password_strength
from recruitai.services.account_service import AccountService
from recruitai.schemas.schemas import (
    SignupRequest, LoginRequest, TokenResponse, UserResponse,
    PasswordCheckRequest, PasswordStrengthResponse, GeneratedPasswordResponse, MessageResponse
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signup", response_model=MessageResponse, status_code=201)
def signup(request: SignupRequest):
    """
    Register a new user account.

    Usernames and emails are unique regardless of case.
    """
    user = AccountService().register(
        first=request.first,
        last=request.last,
        username=request.username,
        email=request.email,
        password=request.password,
    )
    return MessageResponse(message=f"Account created for {user['username']}. Please login.")


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = AccountService().authenticate(request.username, request.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid username or password")

    token = create_access_token(data={"sub": user["id"]})
    return TokenResponse(access_token=token, user_id=user["id"], username=user["username"])


@router.get("/me", response_model=UserResponse)
async def get_me(user: dict = Depends(get_current_user)):
    """Get current authenticated user's info."""
    return UserResponse(**user)


@router.post("/password-strength", response_model=PasswordStrengthResponse)
async def password_strength(request: PasswordCheckRequest):
    return PasswordStrengthResponse(**validate_password_strength(request.password))


@router.get("/generate-password", response_model=GeneratedPasswordResponse)
async def generate_password(length: int = Query(16, ge=8, le=128)):
    return GeneratedPasswordResponse(password=generate_secure_password(length))
