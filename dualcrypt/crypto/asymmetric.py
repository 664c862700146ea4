"""RSA-2048 key generation and RSA-OAEP(SHA-256) encryption."""

import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from dualcrypt.crypto.errors import DecryptionError, InputValidationError
from dualcrypt.crypto.random_source import (
    SALT_BYTES,
    b64decode,
    b64encode,
    random_bytes,
    utf8_encode,
)
from dualcrypt.crypto.types import RsaBundle

logger = logging.getLogger(__name__)

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537
SHA256_BYTES = 32


def max_oaep_plaintext_bytes(key_bits: int, hash_bytes: int) -> int:
    """Largest OAEP plaintext for a key size and hash: k - 2*hLen - 2."""
    return key_bits // 8 - 2 * hash_bytes - 2


MAX_PLAINTEXT_BYTES = max_oaep_plaintext_bytes(RSA_KEY_SIZE, SHA256_BYTES)


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


def generate_rsa_bundle() -> RsaBundle:
    """Generate an RSA-2048 keypair exported as base64 SPKI/PKCS#8 DER."""
    private_key = rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=RSA_KEY_SIZE,
    )
    private_der = private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_der = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return RsaBundle(
        public_key_b64=b64encode(public_der),
        private_key_b64=b64encode(private_der),
        salt_b64=b64encode(random_bytes(SALT_BYTES)),
    )


def load_public_key(public_key_b64: str) -> RSAPublicKey:
    """Load a base64 SPKI DER RSA public key."""
    der = b64decode(public_key_b64, "publicKeyB64")
    try:
        loaded = serialization.load_der_public_key(der)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InputValidationError("invalid public key") from exc
    if not isinstance(loaded, RSAPublicKey):
        raise InputValidationError("invalid public key")
    return loaded


def load_private_key(private_key_b64: str) -> RSAPrivateKey:
    """Load a base64 PKCS#8 DER RSA private key."""
    der = b64decode(private_key_b64, "privateKeyB64")
    try:
        loaded = serialization.load_der_private_key(der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InputValidationError("invalid private key") from exc
    if not isinstance(loaded, RSAPrivateKey):
        raise InputValidationError("invalid private key")
    return loaded


def encrypt(plaintext: str, public_key_b64: str) -> str:
    """Encrypt UTF-8 plaintext with RSA-OAEP(SHA-256, MGF1-SHA256).

    The 2048-bit bound is checked before the key is parsed; a key of any
    other size is then held to its own bound.
    """
    data = utf8_encode(plaintext, "plaintext")
    _check_plaintext_size(data, MAX_PLAINTEXT_BYTES)
    public_key = load_public_key(public_key_b64)
    if public_key.key_size != RSA_KEY_SIZE:
        limit = max_oaep_plaintext_bytes(public_key.key_size, SHA256_BYTES)
        _check_plaintext_size(data, limit)
    return b64encode(public_key.encrypt(data, _oaep()))


def _check_plaintext_size(data: bytes, limit: int) -> None:
    if len(data) > limit:
        raise InputValidationError(f"RSA-OAEP plaintext exceeds {limit} bytes")


def decrypt(cipher_b64: str, private_key_b64: str) -> str:
    """Decrypt base64 RSA-OAEP(SHA-256) ciphertext."""
    private_key = load_private_key(private_key_b64)
    ciphertext = b64decode(cipher_b64, "cipherB64")
    try:
        plain = private_key.decrypt(ciphertext, _oaep())
    except ValueError as exc:
        logger.debug("RSA-OAEP decryption failed: %s", exc)
        raise DecryptionError() from exc
    try:
        return plain.decode()
    except UnicodeDecodeError as exc:
        raise DecryptionError() from exc
