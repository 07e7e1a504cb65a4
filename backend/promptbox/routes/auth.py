"""Auth API routes - thin proxy to the external auth service.

The server keeps no login state. Login, register and the OAuth callback
return the token to the caller, which sends it back as
``Authorization: Bearer <token>`` on later requests.
"""
import logging
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query

from promptbox.schemas.auth import LoginRequest, RegisterRequest, SessionResponse
from promptbox.services.auth_client import (
    AuthAPIError,
    AuthClient,
    AuthSession,
    AuthUser,
    MemoryTokenStore,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """Token from an ``Authorization: Bearer`` header, if one was sent."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def current_user(token: Optional[str] = Depends(bearer_token)) -> Optional[AuthUser]:
    """FastAPI dependency: the verified caller, or None when anonymous."""
    if not token:
        return None
    async with AuthClient(token_store=MemoryTokenStore(token)) as client:
        return await client.verify()


@router.post("/login", response_model=SessionResponse)
async def login(body: LoginRequest):
    async with AuthClient(token_store=MemoryTokenStore()) as client:
        session = await _call_upstream(client.login(body.email, body.password))
    return _to_response(session)


@router.post("/register", response_model=SessionResponse)
async def register(body: RegisterRequest):
    async with AuthClient(token_store=MemoryTokenStore()) as client:
        session = await _call_upstream(client.register(body.email, body.password, body.name))
    return _to_response(session)


@router.get("/success", response_model=SessionResponse)
async def oauth_success(token: Optional[str] = Query(None)):
    """OAuth provider redirect target: verify the ``?token=`` it carries."""
    async with AuthClient(token_store=MemoryTokenStore()) as client:
        session = await _call_upstream(client.accept_oauth_token(token))
    return _to_response(session)


@router.get("/status")
async def auth_status(user: Optional[AuthUser] = Depends(current_user)):
    """Whether the caller's bearer token verifies."""
    return {
        "authenticated": user is not None,
        "user": asdict(user) if user else None,
    }


@router.post("/logout")
async def logout():
    """Nothing is held server-side; the caller drops its token."""
    return {"authenticated": False}


@router.get("/oauth/{provider}")
async def oauth_url(provider: str):
    try:
        return {"url": AuthClient(token_store=MemoryTokenStore()).oauth_url(provider)}
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


async def _call_upstream(call) -> AuthSession:
    try:
        return await call
    except AuthAPIError as e:
        logger.warning(f"Auth upstream error: {e}")
        # Client errors (bad credentials) pass through; everything else is a gateway failure.
        status = e.status if 400 <= e.status < 500 else 502
        raise HTTPException(status_code=status, detail=e.message)


def _to_response(session: AuthSession) -> dict:
    return {
        "token": session.token,
        "user": asdict(session.user) if session.user else None,
    }
