"""AES-256-GCM endpoints."""

from fastapi import APIRouter

from dualcrypt.api.schemas import (
    SymmetricBundleResponse,
    SymmetricDecryptRequest,
    SymmetricEncryptRequest,
    SymmetricEncryptResponse,
    TextResponse,
)
from dualcrypt.crypto import symmetric

router = APIRouter(prefix="/api/symmetric", tags=["symmetric"])


@router.api_route("/generate", methods=["GET", "HEAD"])
def generate() -> SymmetricBundleResponse:
    """GET /api/symmetric/generate -- new 32-byte secret and 16-byte salt."""
    bundle = symmetric.generate_symmetric_bundle()
    return SymmetricBundleResponse(
        secret_b64=bundle.secret_b64,
        salt_b64=bundle.salt_b64,
    )


@router.post("/encrypt")
def encrypt(payload: SymmetricEncryptRequest) -> SymmetricEncryptResponse:
    """POST /api/symmetric/encrypt -- packed base64(IV || ciphertext || tag)."""
    data_b64 = symmetric.encrypt(
        payload.plaintext, payload.secret_b64, payload.salt_b64
    )
    return SymmetricEncryptResponse(data_b64=data_b64)


@router.post("/decrypt")
def decrypt(payload: SymmetricDecryptRequest) -> TextResponse:
    """POST /api/symmetric/decrypt -- recover plaintext from packed data."""
    text = symmetric.decrypt(payload.data_b64, payload.secret_b64, payload.salt_b64)
    return TextResponse(text=text)
