"""FastAPI dependencies shared by the crypto routers."""

from typing import Annotated

from fastapi import Depends

from dualcrypt.core.settings import CryptoSettings


def _load_settings() -> CryptoSettings:
    return CryptoSettings()


Settings = Annotated[CryptoSettings, Depends(_load_settings)]
