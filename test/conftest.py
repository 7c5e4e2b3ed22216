import os

# Settings are read at import time, so the test environment is fixed before
# anything from khet_mitra is imported.
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["OPENWEATHERMAP_API_KEY"] = ""
os.environ["AZURE_STORAGE_CONNECTION_STRING"] = ""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from khet_mitra.models.language import Language
from khet_mitra.models.user import User

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def user() -> User:
    return User(
        id="user-1",
        name="Ramesh Patil",
        aadhaar="123456789012",
        location="Satara, Maharashtra, India",
        language=Language.ENGLISH,
    )


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest_asyncio.fixture(name="client")
async def client_fixture(user: User):
    """HTTP client for the app with authentication resolved to ``user``."""
    from khet_mitra.core.security import get_current_user, verify_jwt
    from khet_mitra.main import app

    app.dependency_overrides[verify_jwt] = lambda: {
        "sub": user.id,
        "language": user.language.value,
    }
    app.dependency_overrides[get_current_user] = lambda: user

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://localhost"
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(name="anon_client")
async def anon_client_fixture():
    """HTTP client without any authentication overrides."""
    from khet_mitra.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://localhost"
    ) as client:
        yield client
