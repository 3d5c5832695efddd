from fastapi import APIRouter, Depends, status
from ...core.security import get_current_user
from ...models import User
from ...schemas import (
    UserRegister,
    UserLogin,
    AuthResponse,
    CurrentUser,
    ForgotPasswordRequest,
    ResetPasswordRequest,
    MessageResponse,
    User as UserSchema,
)
from ...services import AuthService
from ..dependencies import get_auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister, auth_service: AuthService = Depends(get_auth_service)):
    """Register a new user"""
    return auth_service.register(user_data)


@router.post("/login", response_model=AuthResponse)
def login(user_data: UserLogin, auth_service: AuthService = Depends(get_auth_service)):
    """Login user and return a session token"""
    return auth_service.login(user_data)


@router.get("/me", response_model=CurrentUser)
def me(current_user: User = Depends(get_current_user)):
    """Get the authenticated user"""
    return CurrentUser(user=UserSchema.model_validate(current_user))


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(request_data: ForgotPasswordRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Request a password reset email"""
    return {"message": auth_service.forgot_password(request_data.email)}


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(request_data: ResetPasswordRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Reset a password with a token from the reset email"""
    auth_service.reset_password(request_data.token, request_data.password)
    return {"message": "Password reset successful"}
