"""Secure random key material and base64 transport helpers."""

import base64
import binascii
import secrets

from dualcrypt.crypto.errors import InputValidationError

SECRET_BYTES = 32
SALT_BYTES = 16
IV_BYTES = 12


def random_bytes(n: int) -> bytes:
    """Return n bytes from the OS CSPRNG."""
    return secrets.token_bytes(n)


def b64encode(data: bytes) -> str:
    """Encode bytes as standard padded base64."""
    return base64.b64encode(data).decode()


def b64decode(value: str, field: str) -> bytes:
    """Strictly decode standard base64, naming the field on failure."""
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InputValidationError(f"{field} is not valid base64") from exc


def utf8_encode(text: str, field: str) -> bytes:
    """Encode text as UTF-8; lone surrogates are an input error."""
    try:
        return text.encode()
    except UnicodeEncodeError as exc:
        raise InputValidationError(f"{field} is not valid UTF-8") from exc
