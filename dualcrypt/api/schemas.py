"""Pydantic schemas matching the browser client's JSON contract."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict


def _to_camel(name: str) -> str:
    """Convert snake_case to camelCase for JSON serialization."""
    parts = name.split("_")
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


class SymmetricBundleResponse(_CamelModel):
    """Response for GET /api/symmetric/generate."""

    secret_b64: str
    salt_b64: str


class SymmetricEncryptRequest(_CamelModel):
    """Request body for POST /api/symmetric/encrypt."""

    plaintext: NonBlankStr
    secret_b64: NonBlankStr
    salt_b64: NonBlankStr


class SymmetricEncryptResponse(_CamelModel):
    """Packed base64(IV || ciphertext || tag)."""

    data_b64: str


class SymmetricDecryptRequest(_CamelModel):
    """Request body for POST /api/symmetric/decrypt."""

    data_b64: NonBlankStr
    secret_b64: NonBlankStr
    salt_b64: NonBlankStr


class RsaBundleResponse(_CamelModel):
    """Response for GET /api/asymmetric/generate."""

    public_key_b64: str
    private_key_b64: str
    salt_b64: str


class AsymmetricEncryptRequest(_CamelModel):
    """Request body for POST /api/asymmetric/encrypt."""

    plaintext: NonBlankStr
    public_key_b64: NonBlankStr


class AsymmetricDecryptRequest(_CamelModel):
    """Request body for POST /api/asymmetric/decrypt."""

    cipher_b64: NonBlankStr
    private_key_b64: NonBlankStr


class SignRequest(_CamelModel):
    """Request body for POST /api/asymmetric/sign."""

    data: NonBlankStr
    private_key_b64: NonBlankStr


class VerifyRequest(_CamelModel):
    """Request body for POST /api/asymmetric/verify."""

    jwt_token: NonBlankStr
    public_key_b64: NonBlankStr


class TextResponse(BaseModel):
    """Single-field text result."""

    text: str


class VerifyResponse(BaseModel):
    """Original message recovered from a verified token."""

    data: str
