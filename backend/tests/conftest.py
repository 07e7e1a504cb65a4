"""Shared fixtures. Env vars are set before any promptbox import reads settings."""
import os
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="promptbox-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TMP / 'test.db'}")
os.environ.setdefault("AUTH_TOKEN_PATH", str(_TMP / "token"))
os.environ.setdefault("AUTH_API_URL", "http://127.0.0.1:1/api/v1")

import pytest

from promptbox.services.transcoder import ContentFormat

ALL_FORMATS = list(ContentFormat)

ORDINARY_TEXTS = [
    "Summarize the article in three bullet points.",
    "line one\nline two\nline three",
    "  indented start and trailing space  ",
    "\nstarts with newline and ends with one\n",
    "unicode: café ☕",
]


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from promptbox.main import app

    with TestClient(app) as test_client:
        yield test_client
