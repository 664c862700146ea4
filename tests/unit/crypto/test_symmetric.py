"""Tests for AES-256-GCM encryption with HKDF key derivation."""

import base64
import hashlib
import hmac

import pytest
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from dualcrypt.crypto.errors import DecryptionError, InputValidationError
from dualcrypt.crypto.symmetric import (
    decrypt,
    derive_aes_key,
    encrypt,
    generate_symmetric_bundle,
)
from dualcrypt.crypto.types import SymmetricBundle

GCM_TAG_BYTES = 16


def _flip(data_b64: str, index: int) -> str:
    packed = bytearray(base64.b64decode(data_b64))
    packed[index] ^= 0x01
    return base64.b64encode(bytes(packed)).decode()


class TestGenerateSymmetricBundle:
    """Tests for secret + salt generation."""

    def test_sizes(self) -> None:
        bundle = generate_symmetric_bundle()
        assert len(base64.b64decode(bundle.secret_b64)) == 32
        assert len(base64.b64decode(bundle.salt_b64)) == 16

    def test_different_calls_produce_different_material(self) -> None:
        b1 = generate_symmetric_bundle()
        b2 = generate_symmetric_bundle()
        assert b1.secret_b64 != b2.secret_b64
        assert b1.salt_b64 != b2.salt_b64


class TestDeriveAesKey:
    """HKDF-SHA256 extract-then-expand with empty info."""

    def test_matches_rfc5869_schedule(self) -> None:
        secret = bytes(range(32))
        salt = bytes(range(100, 116))
        prk = hmac.new(salt, secret, hashlib.sha256).digest()
        expected = hmac.new(prk, b"\x01", hashlib.sha256).digest()
        assert derive_aes_key(secret, salt) == expected

    def test_salt_changes_key(self) -> None:
        secret = bytes(32)
        assert derive_aes_key(secret, b"a" * 16) != derive_aes_key(secret, b"b" * 16)

    @pytest.mark.parametrize("size", [0, 16, 31, 33, 64])
    def test_rejects_wrong_secret_length(self, size: int) -> None:
        with pytest.raises(InputValidationError, match="secret must be 32 bytes"):
            derive_aes_key(bytes(size), bytes(16))


class TestEncrypt:
    """Tests for packed AES-GCM encryption."""

    def test_concrete_roundtrip(self, sym_bundle: SymmetricBundle) -> None:
        data = encrypt("vanakkam-aes-gcm", sym_bundle.secret_b64, sym_bundle.salt_b64)
        assert decrypt(data, sym_bundle.secret_b64, sym_bundle.salt_b64) == (
            "vanakkam-aes-gcm"
        )

    def test_packed_layout(self, sym_bundle: SymmetricBundle) -> None:
        plaintext = "layout"
        data = encrypt(plaintext, sym_bundle.secret_b64, sym_bundle.salt_b64)
        packed = base64.b64decode(data)
        assert len(packed) == 12 + len(plaintext) + GCM_TAG_BYTES

    def test_layout_decrypts_with_plain_aesgcm(
        self, sym_bundle: SymmetricBundle
    ) -> None:
        data = encrypt("interop", sym_bundle.secret_b64, sym_bundle.salt_b64)
        packed = base64.b64decode(data)
        key = derive_aes_key(
            base64.b64decode(sym_bundle.secret_b64),
            base64.b64decode(sym_bundle.salt_b64),
        )
        assert AESGCM(key).decrypt(packed[:12], packed[12:], None) == b"interop"

    def test_fresh_iv_per_call(self, sym_bundle: SymmetricBundle) -> None:
        d1 = encrypt("same", sym_bundle.secret_b64, sym_bundle.salt_b64)
        d2 = encrypt("same", sym_bundle.secret_b64, sym_bundle.salt_b64)
        assert base64.b64decode(d1)[:12] != base64.b64decode(d2)[:12]
        assert d1 != d2

    @pytest.mark.parametrize("text", ["", "ünïcødé ✓", "x" * 10_000])
    def test_roundtrip_various(self, sym_bundle: SymmetricBundle, text: str) -> None:
        data = encrypt(text, sym_bundle.secret_b64, sym_bundle.salt_b64)
        assert decrypt(data, sym_bundle.secret_b64, sym_bundle.salt_b64) == text

    def test_rejects_invalid_base64_secret(self, sym_bundle: SymmetricBundle) -> None:
        with pytest.raises(InputValidationError, match="secretB64"):
            encrypt("x", "not base64!", sym_bundle.salt_b64)

    def test_rejects_lone_surrogate(self, sym_bundle: SymmetricBundle) -> None:
        with pytest.raises(InputValidationError, match="not valid UTF-8"):
            encrypt("a\ud800b", sym_bundle.secret_b64, sym_bundle.salt_b64)


class TestDecrypt:
    """Tests for tamper, wrong-key, and malformed-input rejection."""

    @pytest.mark.parametrize("index", [0, 11, 12, -1])
    def test_tampered_byte_fails(
        self, sym_bundle: SymmetricBundle, index: int
    ) -> None:
        data = encrypt("auth-me-pls", sym_bundle.secret_b64, sym_bundle.salt_b64)
        with pytest.raises(DecryptionError, match="^decryption failed$"):
            decrypt(_flip(data, index), sym_bundle.secret_b64, sym_bundle.salt_b64)

    def test_wrong_salt_fails(self, sym_bundle: SymmetricBundle) -> None:
        data = encrypt("salt-sensitive", sym_bundle.secret_b64, sym_bundle.salt_b64)
        other_salt = base64.b64encode(bytes(16)).decode()
        with pytest.raises(DecryptionError):
            decrypt(data, sym_bundle.secret_b64, other_salt)

    def test_wrong_secret_fails(self, sym_bundle: SymmetricBundle) -> None:
        data = encrypt("secret-sensitive", sym_bundle.secret_b64, sym_bundle.salt_b64)
        other = generate_symmetric_bundle()
        with pytest.raises(DecryptionError):
            decrypt(data, other.secret_b64, sym_bundle.salt_b64)

    @pytest.mark.parametrize("size", [0, 1, 12])
    def test_too_short_rejected(self, sym_bundle: SymmetricBundle, size: int) -> None:
        data = base64.b64encode(bytes(size)).decode()
        with pytest.raises(InputValidationError, match="cipher too short"):
            decrypt(data, sym_bundle.secret_b64, sym_bundle.salt_b64)

    def test_truncated_tag_fails(self, sym_bundle: SymmetricBundle) -> None:
        data = base64.b64encode(bytes(13)).decode()
        with pytest.raises(DecryptionError):
            decrypt(data, sym_bundle.secret_b64, sym_bundle.salt_b64)

    def test_invalid_base64_data(self, sym_bundle: SymmetricBundle) -> None:
        with pytest.raises(InputValidationError, match="dataB64"):
            decrypt("%%%", sym_bundle.secret_b64, sym_bundle.salt_b64)
