"""AES-256-GCM with HKDF-SHA256 key derivation and packed IV transport."""

import logging

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from dualcrypt.crypto.errors import DecryptionError, InputValidationError
from dualcrypt.crypto.random_source import (
    IV_BYTES,
    SALT_BYTES,
    SECRET_BYTES,
    b64decode,
    b64encode,
    random_bytes,
    utf8_encode,
)
from dualcrypt.crypto.types import SymmetricBundle

logger = logging.getLogger(__name__)

AES_KEY_BYTES = 32
HKDF_INFO = b""


def generate_symmetric_bundle() -> SymmetricBundle:
    """Generate a random 32-byte secret and 16-byte salt."""
    return SymmetricBundle(
        secret_b64=b64encode(random_bytes(SECRET_BYTES)),
        salt_b64=b64encode(random_bytes(SALT_BYTES)),
    )


def derive_aes_key(secret: bytes, salt: bytes) -> bytes:
    """Derive the AES-256 key from secret and salt with RFC 5869 HKDF."""
    if len(secret) != SECRET_BYTES:
        raise InputValidationError(f"secret must be {SECRET_BYTES} bytes")
    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=AES_KEY_BYTES,
        salt=salt,
        info=HKDF_INFO,
    )
    return hkdf.derive(secret)


def _key_from_b64(secret_b64: str, salt_b64: str) -> bytes:
    secret = b64decode(secret_b64, "secretB64")
    salt = b64decode(salt_b64, "saltB64")
    return derive_aes_key(secret, salt)


def encrypt(plaintext: str, secret_b64: str, salt_b64: str) -> str:
    """Encrypt to base64(IV || ciphertext || tag) under a fresh 12-byte IV."""
    key = _key_from_b64(secret_b64, salt_b64)
    iv = random_bytes(IV_BYTES)
    sealed = AESGCM(key).encrypt(iv, utf8_encode(plaintext, "plaintext"), None)
    return b64encode(iv + sealed)


def decrypt(data_b64: str, secret_b64: str, salt_b64: str) -> str:
    """Decrypt the packed form produced by encrypt()."""
    packed = b64decode(data_b64, "dataB64")
    if len(packed) <= IV_BYTES:
        raise InputValidationError("cipher too short")
    iv, sealed = packed[:IV_BYTES], packed[IV_BYTES:]
    key = _key_from_b64(secret_b64, salt_b64)
    try:
        plain = AESGCM(key).decrypt(iv, sealed, None)
    except InvalidTag as exc:
        logger.debug("AES-GCM authentication failed: %s", type(exc).__name__)
        raise DecryptionError() from exc
    try:
        return plain.decode()
    except UnicodeDecodeError as exc:
        raise DecryptionError() from exc
