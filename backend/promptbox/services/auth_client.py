"""Async client for the external auth API and local token storage.

Endpoints (relative to ``AUTH_API_URL``):
    POST /auth/login      {email, password}        -> {"data": {"token", "user"}}
    POST /auth/register   {email, password, name}  -> {"data": {"token", "user"}}
    GET  /auth/verify     Authorization: Bearer    -> {"data": {"user"}}
    GET  /auth/github, /auth/google                   OAuth redirects
Failures carry {"error": {"message"}}.
"""
import asyncio
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import aiohttp

from promptbox.config import settings

logger = logging.getLogger(__name__)

OAUTH_PROVIDERS = ("github", "google")


class AuthAPIError(Exception):
    """Error from auth API calls, carrying status, message and URL."""

    def __init__(self, status: int, message: str, url: str):
        self.status = status
        self.message = message
        self.url = url
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status} from {self.url}: {self.message}"
        return f"Connection error for {self.url}: {self.message}"


@dataclass
class AuthUser:
    id: str
    email: str
    name: str
    avatar_url: Optional[str] = None
    provider: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthUser":
        return cls(
            id=str(data.get("id", "")),
            email=data.get("email", ""),
            name=data.get("name", ""),
            avatar_url=data.get("avatar_url"),
            provider=data.get("provider"),
        )


@dataclass
class AuthSession:
    token: Optional[str] = None
    user: Optional[AuthUser] = None
    extra: Dict[str, Any] = field(default_factory=dict)


class TokenStore:
    """Bearer token persisted to a single file."""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or settings.AUTH_TOKEN_PATH)

    def get(self) -> Optional[str]:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def set(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token, encoding="utf-8")
        try:
            os.chmod(self.path, 0o600)
        except OSError as e:
            logger.warning(f"Could not restrict token file permissions: {e}")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

    def is_authenticated(self) -> bool:
        return self.get() is not None

    def auth_headers(self) -> Dict[str, str]:
        token = self.get()
        return {"Authorization": f"Bearer {token}"} if token else {}


class MemoryTokenStore(TokenStore):
    """Token held only for the caller that supplied it; never written to disk."""

    def __init__(self, token: Optional[str] = None):
        self._token = token or None

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class AuthClient:
    """Async HTTP client for the auth API.

    Use as an async context manager to share one connection pool across
    calls; without ``async with`` each call opens its own session.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_store: Optional[TokenStore] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.AUTH_API_URL).rstrip("/")
        self.token_store = token_store or TokenStore()
        self._session: Optional[aiohttp.ClientSession] = None
        self._timeout = aiohttp.ClientTimeout(total=timeout or settings.AUTH_TIMEOUT)

    async def open(self) -> None:
        if not self._session:
            self._session = aiohttp.ClientSession(timeout=self._timeout)

    async def close(self) -> None:
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "AuthClient":
        await self.open()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    def oauth_url(self, provider: str) -> str:
        if provider not in OAUTH_PROVIDERS:
            raise ValueError(f"Unsupported OAuth provider: {provider}")
        return f"{self.base_url}/auth/{provider}"

    async def login(self, email: str, password: str) -> AuthSession:
        data = await self._request(
            "POST", "/auth/login",
            json={"email": email, "password": password},
            fallback_error="Login failed",
        )
        return self._store_session(data)

    async def register(self, email: str, password: str, name: str) -> AuthSession:
        data = await self._request(
            "POST", "/auth/register",
            json={"email": email, "password": password, "name": name},
            fallback_error="Registration failed",
        )
        return self._store_session(data)

    async def verify(self) -> Optional[AuthUser]:
        """Check the stored token. A rejected token is removed from the store."""
        headers = self.token_store.auth_headers()
        if not headers:
            return None
        try:
            data = await self._request(
                "GET", "/auth/verify", headers=headers,
                fallback_error="Token verification failed",
            )
        except AuthAPIError as e:
            logger.warning(f"Auth check failed: {e}")
            self.token_store.clear()
            return None
        user = data.get("user")
        return AuthUser.from_dict(user) if user else None

    async def accept_oauth_token(self, token: Optional[str]) -> AuthSession:
        """Finish an OAuth login from the provider redirect's ``?token=``.

        A missing token means the provider flow failed. A present token is
        verified before it is stored.
        """
        token = (token or "").strip()
        if not token:
            raise AuthAPIError(
                status=400,
                message="Authentication failed: no token in OAuth redirect",
                url=f"{self.base_url}/auth/success",
            )
        data = await self._request(
            "GET", "/auth/verify",
            headers={"Authorization": f"Bearer {token}"},
            fallback_error="Token verification failed",
        )
        self.token_store.set(token)
        user = data.get("user")
        return AuthSession(token=token, user=AuthUser.from_dict(user) if user else None)

    def logout(self) -> None:
        self.token_store.clear()

    def _store_session(self, data: Dict[str, Any]) -> AuthSession:
        token = data.get("token")
        if not token:
            raise AuthAPIError(status=0, message="Response did not include a token", url=self.base_url)
        self.token_store.set(token)
        user = data.get("user")
        return AuthSession(
            token=token,
            user=AuthUser.from_dict(user) if user else None,
            extra={k: v for k, v in data.items() if k not in ("token", "user")},
        )

    async def _request(
        self, method: str, path: str,
        json: Optional[dict] = None,
        headers: Optional[dict] = None,
        fallback_error: str = "Request failed",
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        if self._session:
            return await self._send(self._session, method, url, json, headers, fallback_error)
        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            return await self._send(session, method, url, json, headers, fallback_error)

    @staticmethod
    async def _send(
        session: aiohttp.ClientSession, method: str, url: str,
        payload: Optional[dict], headers: Optional[dict], fallback_error: str,
    ) -> Dict[str, Any]:
        """Execute one request and unwrap the ``data`` envelope."""
        try:
            async with session.request(method, url, json=payload, headers=headers) as resp:
                try:
                    body = await resp.json(content_type=None)
                except ValueError:
                    body = None
                if resp.status >= 400:
                    message = fallback_error
                    error = body.get("error") if isinstance(body, dict) else None
                    if isinstance(error, dict) and error.get("message"):
                        message = error["message"]
                    raise AuthAPIError(status=resp.status, message=message, url=url)
        except AuthAPIError:
            raise
        except asyncio.TimeoutError as e:
            raise AuthAPIError(status=0, message="Request timed out", url=url) from e
        except aiohttp.ClientError as e:
            raise AuthAPIError(status=0, message=str(e) or type(e).__name__, url=url) from e

        if not isinstance(body, dict):
            raise AuthAPIError(status=resp.status, message="Response was not a JSON object", url=url)
        return body.get("data") or {}
