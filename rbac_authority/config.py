"""Authority configuration from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from rbac_authority.database.database import DEFAULT_DATABASE_URL


class AuthoritySettings(BaseSettings):
    """Settings loaded from ``AUTHORITY_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="AUTHORITY_")

    DATABASE_URL: str = DEFAULT_DATABASE_URL
    TABLES_PREFIX: str = ""
    ECHO: bool = False
    AUTO_MIGRATE: bool = True
