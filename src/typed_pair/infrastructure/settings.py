"""Library settings using pydantic-settings.

Settings are loaded from environment variables (or a ``.env`` file) with
defaults suitable for production use.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PairSettings(BaseSettings):
    """Settings for pair storage adapters.

    Environment variables:
        TYPED_PAIR_STRICT_DECODING: Reject lax type coercion when loading
            pairs from a database (default: true)
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPED_PAIR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict_decoding: bool = Field(
        default=True,
        description="Default strictness for PairType columns",
    )


@lru_cache
def get_settings() -> PairSettings:
    """Get cached settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return PairSettings()
