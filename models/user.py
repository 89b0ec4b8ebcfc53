"""User models for authentication and database storage."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class SignupRequest(BaseModel):
    """Schema for user registration. Presence is checked by the account service."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Schema for user login."""
    email: Optional[str] = None
    password: Optional[str] = None


class UserInDB(BaseModel):
    """Schema for user stored in database."""
    id: str
    name: str
    email: str
    password_hash: str
    created_at: datetime


class UserPublic(BaseModel):
    """Schema for user response (without sensitive data)."""
    id: str
    name: str
    email: str


class AuthResponse(BaseModel):
    """Schema for signup and login responses."""
    user: UserPublic
    token: str


class Token(BaseModel):
    """Schema for OAuth2 token response."""
    access_token: str
    token_type: str = "bearer"
