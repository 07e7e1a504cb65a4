"""Auth request/response schemas."""
from pydantic import BaseModel
from typing import Optional


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(LoginRequest):
    name: str


class UserResponse(BaseModel):
    id: str
    email: str
    name: str
    avatar_url: Optional[str] = None
    provider: Optional[str] = None


class SessionResponse(BaseModel):
    token: str
    user: Optional[UserResponse] = None
