"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

TOKEN_TTL_DEFAULT = 3600


class CryptoSettings(BaseSettings):
    """Service settings for the crypto API."""

    model_config = SettingsConfigDict(env_prefix="DUALCRYPT_")

    cors_origins: str = ""
    token_ttl: int = TOKEN_TTL_DEFAULT
    log_level: str = "INFO"

    def get_cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins."""
        if not self.cors_origins:
            return []
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
