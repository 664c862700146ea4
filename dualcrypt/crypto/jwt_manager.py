"""RS256 token signing and verification over a string or JSON-object message."""

import base64
import binascii
import json
import logging
import re
from datetime import UTC, datetime
from typing import Any

import jwt
from jwt.types import Options

from dualcrypt.crypto.asymmetric import load_private_key, load_public_key
from dualcrypt.crypto.errors import (
    InputValidationError,
    SignatureError,
    TokenExpiredError,
    TokenFormatError,
)
from dualcrypt.crypto.types import ObjectClaims, StringClaim

logger = logging.getLogger(__name__)

TOKEN_DEFAULT_TTL = 3600
TOKEN_ALGORITHM = "RS256"
TOKEN_SEGMENTS = 3
TIMESTAMP_CLAIMS = ("iat", "exp")
_B64URL_SEGMENT = re.compile(r"[A-Za-z0-9_-]*")

# Object claims are caller data; exp is enforced after decode.
_VERIFY_OPTIONS: Options = {
    "verify_signature": True,
    "verify_exp": False,
    "verify_iat": False,
    "verify_nbf": False,
    "verify_iss": False,
    "verify_aud": False,
    "verify_sub": False,
    "verify_jti": False,
}


def classify_message(message: str) -> StringClaim | ObjectClaims:
    """Decide whether a message is signed as raw claims or wrapped as data."""
    try:
        parsed = json.loads(message)
    except ValueError:
        return StringClaim(data=message)
    if isinstance(parsed, dict):
        return ObjectClaims(claims=parsed)
    return StringClaim(data=message)


def _build_payload(
    claim: StringClaim | ObjectClaims, issued_at: int, ttl_seconds: int
) -> dict[str, Any]:
    if isinstance(claim, ObjectClaims):
        payload = dict(claim.claims)
    else:
        payload = {"data": claim.data}
    payload.setdefault("iat", issued_at)
    payload.setdefault("exp", issued_at + ttl_seconds)
    return payload


def sign_message(
    message: str,
    private_key_b64: str,
    ttl_seconds: int = TOKEN_DEFAULT_TTL,
    now: datetime | None = None,
) -> str:
    """Sign a message as header.payload.signature with RS256."""
    private_key = load_private_key(private_key_b64)
    issued_at = int((now or datetime.now(UTC)).timestamp())
    payload = _build_payload(classify_message(message), issued_at, ttl_seconds)
    try:
        return jwt.encode(payload, private_key, algorithm=TOKEN_ALGORITHM)
    except TypeError as exc:
        raise InputValidationError("message claims cannot be signed") from exc


def _render_payload(payload: dict[str, Any]) -> str:
    if "data" in payload:
        data = payload["data"]
        if isinstance(data, str):
            return data
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    claims = {k: v for k, v in payload.items() if k not in TIMESTAMP_CLAIMS}
    return json.dumps(claims, separators=(",", ":"), ensure_ascii=False)


def _canonical_b64url(segment: str) -> str | None:
    """Re-encode a base64url segment, or None if it does not decode."""
    if not _B64URL_SEGMENT.fullmatch(segment):
        return None
    try:
        raw = base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))
    except (binascii.Error, ValueError):
        return None
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def _check_expiry(payload: dict[str, Any], now: datetime | None) -> None:
    exp = payload.get("exp")
    if exp is None:
        return
    if isinstance(exp, bool) or not isinstance(exp, int | float):
        raise TokenFormatError("invalid token format")
    current = int((now or datetime.now(UTC)).timestamp())
    if current > exp:
        raise TokenExpiredError()


def verify_token(token: str, public_key_b64: str, now: datetime | None = None) -> str:
    """Verify an RS256 token and return the message it was signed from.

    Checks run in a fixed order: segment count, signature, then exp. A token
    is expired only once the current whole second is past exp.
    """
    segments = token.split(".")
    if len(segments) != TOKEN_SEGMENTS:
        raise TokenFormatError("invalid token format")
    public_key = load_public_key(public_key_b64)
    # Unused trailing bits would otherwise let a mutated segment verify.
    canonical = _canonical_b64url(segments[2])
    if canonical is not None and canonical != segments[2]:
        raise SignatureError()
    try:
        payload = jwt.decode(
            token,
            public_key,
            algorithms=[TOKEN_ALGORITHM],
            options=_VERIFY_OPTIONS,
        )
    except jwt.InvalidSignatureError as exc:
        logger.debug("Token signature mismatch")
        raise SignatureError() from exc
    except jwt.PyJWTError as exc:
        logger.debug("Token rejected: %s", exc)
        raise TokenFormatError("invalid token format") from exc
    _check_expiry(payload, now)
    return _render_payload(payload)
