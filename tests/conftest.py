"""Shared test fixtures for DualCrypt."""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from dualcrypt.core.app import create_app
from dualcrypt.crypto.asymmetric import generate_rsa_bundle
from dualcrypt.crypto.symmetric import generate_symmetric_bundle
from dualcrypt.crypto.types import RsaBundle, SymmetricBundle


@pytest.fixture(autouse=True)
def _set_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set environment variables for test settings."""
    monkeypatch.setenv("DUALCRYPT_CORS_ORIGINS", "http://localhost:5173")
    monkeypatch.setenv("DUALCRYPT_TOKEN_TTL", "3600")


@pytest.fixture
def sym_bundle() -> SymmetricBundle:
    return generate_symmetric_bundle()


@pytest.fixture(scope="session")
def rsa_bundle() -> RsaBundle:
    """One RSA keypair per session; generation is slow."""
    return generate_rsa_bundle()


@pytest.fixture(scope="session")
def other_rsa_bundle() -> RsaBundle:
    return generate_rsa_bundle()


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Create an httpx test client against a fresh app."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
