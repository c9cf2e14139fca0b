"""
CMS authentication endpoints
"""
from fastapi import APIRouter, Depends
from constants import HTTPStatus, ServerConfig
from config.settings import settings
from dependencies import get_auth_service, get_current_user
from dtos.request import RegisterRequest, LoginRequest
from dtos.response import RegisterResponse, LoginResponse, UserResponse
from models import User
from services.auth_service import AuthService
from utils.error_handlers import handle_api_errors

router = APIRouter(prefix=f"{ServerConfig.CMS_PREFIX}/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Register")
def register(request: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    """Create a CMS account. The password is stored as a bcrypt hash."""
    user = service.register(request)
    return RegisterResponse(message="Register successful", user=UserResponse.model_validate(user))


@router.post("/login", response_model=LoginResponse)
@handle_api_errors("Login")
def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """
    Exchange email and password for a bearer token.

    Returns 401 with the same message for an unknown email and a wrong password.
    """
    token, user = service.login(request)
    return LoginResponse(
        message="Login successful",
        token=token,
        expires_in=settings.jwt_expires_in,
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    """Return the account behind the bearer token."""
    return user
