"""Account service for signup and login."""

import asyncio
import logging
from typing import Optional

from config.logging_utils import log_debug, log_error, log_success
from models.user import AuthResponse, UserInDB, UserPublic
from services.errors import (
    ConflictError,
    InvalidInputError,
    UnauthenticatedError,
    UnauthorizedError,
)
from services.security import hash_password, verify_password
from services.stores import EmailAlreadyExists, UserStore
from services.token_service import TokenService

logger = logging.getLogger(f"taskflow.{__name__}")

INVALID_CREDENTIALS = "Invalid credentials"


def to_public(user: UserInDB) -> UserPublic:
    return UserPublic(id=user.id, name=user.name, email=user.email)


class AccountService:
    """Signup and login flows. The only operations that do not need a token."""

    def __init__(self, users: UserStore, tokens: TokenService, bcrypt_rounds: int = 12):
        self.users = users
        self.tokens = tokens
        self.bcrypt_rounds = bcrypt_rounds
        self._dummy_hash: Optional[str] = None

    async def _dummy_hash_value(self) -> str:
        """Hash compared against when the email is unknown, built once with the configured rounds."""
        if self._dummy_hash is None:
            self._dummy_hash = await asyncio.to_thread(hash_password, "unknown-user", self.bcrypt_rounds)
        return self._dummy_hash

    def _auth_response(self, user: UserInDB) -> AuthResponse:
        return AuthResponse(user=to_public(user), token=self.tokens.issue(user.id))

    async def signup(self, name: Optional[str], email: Optional[str], password: Optional[str]) -> AuthResponse:
        """
        Register a new user and issue a token.

        Raises:
            InvalidInputError: If name, email or password is missing or empty
            ConflictError: If the email is already registered
        """
        if not name or not email or not password:
            raise InvalidInputError("All fields required")

        if await self.users.get_by_email(email):
            log_error("Signup rejected, email already registered", prefix="AUTH")
            raise ConflictError("User exists")

        password_hash = await asyncio.to_thread(hash_password, password, self.bcrypt_rounds)
        try:
            user = await self.users.create(name, email, password_hash)
        except EmailAlreadyExists:
            raise ConflictError("User exists")

        log_success(f"Created user_id={user.id}", prefix="AUTH")
        return self._auth_response(user)

    async def login(self, email: Optional[str], password: Optional[str]) -> AuthResponse:
        """
        Authenticate a user with email and password.

        Unknown emails and wrong passwords fail the same way.

        Raises:
            InvalidInputError: If email or password is missing
            UnauthorizedError: If the credentials do not match a user
        """
        if not email or not password:
            raise InvalidInputError("Email & password required")

        user = await self.users.get_by_email(email)
        if not user:
            # same bcrypt cost as a wrong password
            await asyncio.to_thread(verify_password, password, await self._dummy_hash_value())
            log_debug("Login failed: unknown email", prefix="AUTH")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if not await asyncio.to_thread(verify_password, password, user.password_hash):
            log_debug(f"Login failed: wrong password for user_id={user.id}", prefix="AUTH")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        log_debug(f"Login succeeded for user_id={user.id}", prefix="AUTH")
        return self._auth_response(user)

    async def get_profile(self, user_id: str) -> UserPublic:
        """Get the public projection of an authenticated user."""
        user = await self.users.get_by_id(user_id)
        if user is None:
            logger.warning(f"[AUTH] Valid token for missing user_id={user_id}")
            raise UnauthenticatedError("Invalid or expired token")
        return to_public(user)
