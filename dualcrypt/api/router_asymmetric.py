"""RSA-OAEP encryption and RS256 sign/verify endpoints."""

from fastapi import APIRouter

from dualcrypt.api.deps import Settings
from dualcrypt.api.schemas import (
    AsymmetricDecryptRequest,
    AsymmetricEncryptRequest,
    RsaBundleResponse,
    SignRequest,
    TextResponse,
    VerifyRequest,
    VerifyResponse,
)
from dualcrypt.crypto import asymmetric
from dualcrypt.crypto.jwt_manager import sign_message, verify_token

router = APIRouter(prefix="/api/asymmetric", tags=["asymmetric"])


@router.api_route("/generate", methods=["GET", "HEAD"])
def generate() -> RsaBundleResponse:
    """GET /api/asymmetric/generate -- RSA-2048 keypair and salt."""
    bundle = asymmetric.generate_rsa_bundle()
    return RsaBundleResponse(
        public_key_b64=bundle.public_key_b64,
        private_key_b64=bundle.private_key_b64,
        salt_b64=bundle.salt_b64,
    )


@router.post("/encrypt")
def encrypt(payload: AsymmetricEncryptRequest) -> TextResponse:
    """POST /api/asymmetric/encrypt -- at most 190 UTF-8 bytes."""
    cipher_b64 = asymmetric.encrypt(payload.plaintext, payload.public_key_b64)
    return TextResponse(text=cipher_b64)


@router.post("/decrypt")
def decrypt(payload: AsymmetricDecryptRequest) -> TextResponse:
    """POST /api/asymmetric/decrypt."""
    text = asymmetric.decrypt(payload.cipher_b64, payload.private_key_b64)
    return TextResponse(text=text)


@router.post("/sign")
def sign(payload: SignRequest, settings: Settings) -> TextResponse:
    """POST /api/asymmetric/sign -- RS256 token over the message."""
    token = sign_message(
        payload.data, payload.private_key_b64, ttl_seconds=settings.token_ttl
    )
    return TextResponse(text=token)


@router.post("/verify")
def verify(payload: VerifyRequest) -> VerifyResponse:
    """POST /api/asymmetric/verify -- original message from a valid token."""
    return VerifyResponse(data=verify_token(payload.jwt_token, payload.public_key_b64))
