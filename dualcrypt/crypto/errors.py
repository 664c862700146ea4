"""Error taxonomy shared by the symmetric, asymmetric, and token codecs."""


class CryptoError(Exception):
    """Base class for every failure a codec reports to its caller."""

    code = "crypto_error"


class InputValidationError(CryptoError):
    """Input rejected before any cryptographic primitive runs."""

    code = "invalid_request"


class DecryptionError(CryptoError):
    """AEAD tag or OAEP padding check failed."""

    code = "decryption_failed"

    def __init__(self) -> None:
        super().__init__("decryption failed")


class TokenFormatError(CryptoError):
    """Token is structurally malformed."""

    code = "invalid_token"


class SignatureError(CryptoError):
    """Token signature does not match the public key."""

    code = "invalid_signature"

    def __init__(self) -> None:
        super().__init__("signature verification failed")


class TokenExpiredError(CryptoError):
    """Token signature is valid but its exp claim has passed."""

    code = "token_expired"

    def __init__(self) -> None:
        super().__init__("token expired")
