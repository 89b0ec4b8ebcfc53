"""Authentication router for user signup, login, and profile."""

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm

from models.user import AuthResponse, LoginRequest, SignupRequest, Token, UserPublic
from services.auth_service import AccountService
from api.dependencies import get_account_service, get_current_user_id


router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    user_data: SignupRequest,
    accounts: AccountService = Depends(get_account_service)
):
    """Register a new user account and return a token."""
    return await accounts.signup(user_data.name, user_data.email, user_data.password)


@router.post("/login", response_model=AuthResponse)
async def login(
    user_data: LoginRequest,
    accounts: AccountService = Depends(get_account_service)
):
    """Authenticate user and return JWT token."""
    return await accounts.login(user_data.email, user_data.password)


@router.post("/login/form", response_model=Token)
async def login_form(
    form_data: OAuth2PasswordRequestForm = Depends(),
    accounts: AccountService = Depends(get_account_service)
):
    """Authenticate user via OAuth2 form and return JWT token (for Swagger UI)."""
    result = await accounts.login(form_data.username, form_data.password)
    return Token(access_token=result.token)


@router.get("/me", response_model=UserPublic)
async def get_me(
    user_id: str = Depends(get_current_user_id),
    accounts: AccountService = Depends(get_account_service)
):
    """Get current authenticated user information."""
    return await accounts.get_profile(user_id)
