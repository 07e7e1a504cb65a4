"""Tests for the auth API client against a local aiohttp server."""
import asyncio

import pytest
from aiohttp import test_utils, web

from promptbox.services.auth_client import AuthAPIError, AuthClient, MemoryTokenStore, TokenStore

USER = {"id": "u1", "email": "ada@example.com", "name": "Ada"}


async def _login(request):
    body = await request.json()
    if body.get("password") != "secret":
        return web.json_response({"error": {"message": "Invalid credentials"}}, status=401)
    return web.json_response({"data": {"token": "tok-123", "user": USER}})


async def _register(request):
    return web.json_response({"error": {}}, status=409)


async def _verify(request):
    if request.headers.get("Authorization") != "Bearer tok-123":
        return web.json_response({"error": {"message": "Invalid token"}}, status=401)
    return web.json_response({"data": {"user": USER}})


def _run(scenario):
    async def main():
        app = web.Application()
        app.router.add_post("/api/v1/auth/login", _login)
        app.router.add_post("/api/v1/auth/register", _register)
        app.router.add_get("/api/v1/auth/verify", _verify)
        async with test_utils.TestServer(app) as server:
            return await scenario(str(server.make_url("/api/v1")))
    return asyncio.run(main())


@pytest.fixture
def store(tmp_path):
    return TokenStore(str(tmp_path / "token"))


def test_login_stores_token(store):
    async def scenario(base_url):
        async with AuthClient(base_url=base_url, token_store=store) as client:
            return await client.login("ada@example.com", "secret")

    session = _run(scenario)
    assert session.token == "tok-123"
    assert session.user.name == "Ada"
    assert store.get() == "tok-123"
    assert store.auth_headers() == {"Authorization": "Bearer tok-123"}


def test_login_failure_carries_server_message(store):
    async def scenario(base_url):
        client = AuthClient(base_url=base_url, token_store=store)
        with pytest.raises(AuthAPIError) as exc:
            await client.login("ada@example.com", "wrong")
        return exc.value

    error = _run(scenario)
    assert error.status == 401
    assert error.message == "Invalid credentials"
    assert not store.is_authenticated()


def test_register_failure_falls_back_to_default_message(store):
    async def scenario(base_url):
        client = AuthClient(base_url=base_url, token_store=store)
        with pytest.raises(AuthAPIError) as exc:
            await client.register("ada@example.com", "secret", "Ada")
        return exc.value

    assert _run(scenario).message == "Registration failed"


def test_verify_valid_token(store):
    store.set("tok-123")

    async def scenario(base_url):
        return await AuthClient(base_url=base_url, token_store=store).verify()

    user = _run(scenario)
    assert user.email == "ada@example.com"


def test_verify_rejected_token_is_cleared(store):
    store.set("stale")

    async def scenario(base_url):
        return await AuthClient(base_url=base_url, token_store=store).verify()

    assert _run(scenario) is None
    assert store.get() is None


def test_verify_without_token_skips_network(store):
    client = AuthClient(base_url="http://127.0.0.1:1/api/v1", token_store=store)
    assert asyncio.run(client.verify()) is None


def test_connection_error(store):
    client = AuthClient(base_url="http://127.0.0.1:1/api/v1", token_store=store)
    with pytest.raises(AuthAPIError) as exc:
        asyncio.run(client.login("a@b.c", "x"))
    assert exc.value.status == 0
    assert "Connection error" in str(exc.value)


def test_oauth_url_and_logout(store):
    client = AuthClient(base_url="http://auth.local/api/v1/", token_store=store)
    assert client.oauth_url("github") == "http://auth.local/api/v1/auth/github"
    with pytest.raises(ValueError):
        client.oauth_url("myspace")
    store.set("tok")
    client.logout()
    assert not store.is_authenticated()


def test_accept_oauth_token_verifies_and_stores(store):
    async def scenario(base_url):
        client = AuthClient(base_url=base_url, token_store=store)
        return await client.accept_oauth_token("tok-123")

    session = _run(scenario)
    assert session.user.email == "ada@example.com"
    assert store.get() == "tok-123"


def test_accept_oauth_token_rejected(store):
    async def scenario(base_url):
        client = AuthClient(base_url=base_url, token_store=store)
        with pytest.raises(AuthAPIError) as exc:
            await client.accept_oauth_token("forged")
        return exc.value

    assert _run(scenario).status == 401
    assert store.get() is None


def test_accept_oauth_token_missing(store):
    client = AuthClient(base_url="http://127.0.0.1:1/api/v1", token_store=store)
    with pytest.raises(AuthAPIError) as exc:
        asyncio.run(client.accept_oauth_token(None))
    assert exc.value.status == 400
    assert store.get() is None


def test_memory_store_never_touches_disk(tmp_path):
    memory = MemoryTokenStore("tok")
    assert memory.auth_headers() == {"Authorization": "Bearer tok"}
    memory.clear()
    assert not memory.is_authenticated()
    assert list(tmp_path.iterdir()) == []
