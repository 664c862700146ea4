"""Type definitions for key bundles and signed token payloads."""

from typing import Any

from pydantic import BaseModel


class SymmetricBundle(BaseModel):
    """A 32-byte HKDF input secret and its 16-byte salt, base64-encoded."""

    secret_b64: str
    salt_b64: str


class RsaBundle(BaseModel):
    """An RSA-2048 keypair as SPKI/PKCS#8 DER, base64-encoded.

    The salt is not used by RSA; it keeps the bundle shape aligned with
    SymmetricBundle for clients that store both.
    """

    public_key_b64: str
    private_key_b64: str
    salt_b64: str


class StringClaim(BaseModel):
    """Token payload wrapping a message that is not a JSON object."""

    data: str


class ObjectClaims(BaseModel):
    """Token payload built from a message that parses as a JSON object."""

    claims: dict[str, Any]
