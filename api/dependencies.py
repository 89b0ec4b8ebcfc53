"""API dependencies for authentication and service access."""

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from typing import Optional

from config.logging_utils import log_debug
from services.auth_service import AccountService
from services.errors import UnauthenticatedError
from services.task_service import TaskService
from services.token_service import TokenService


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login/form", auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service


def get_task_service(request: Request) -> TaskService:
    return request.app.state.task_service


async def get_token_from_request(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[str]:
    """Extract the bearer token from the Authorization header."""
    return token or None


async def get_current_user_id(
    request: Request,
    token: Optional[str] = Depends(get_token_from_request),
    tokens: TokenService = Depends(get_token_service)
) -> str:
    """
    Resolve the authenticated user id from the bearer token.

    The id is also bound to request.state.user_id. Never touches the
    database.
    """
    if not token:
        log_debug(f"Rejected {request.method} {request.url.path}: no token", prefix="GATE")
        raise UnauthenticatedError("No token")

    user_id = tokens.verify(token)
    if user_id is None:
        log_debug(f"Rejected {request.method} {request.url.path}: invalid token", prefix="GATE")
        raise UnauthenticatedError("Invalid or expired token")

    request.state.user_id = user_id
    return user_id
