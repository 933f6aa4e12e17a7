"""Authentication settings using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Authentication configuration - single source of truth.

    All settings loaded from environment variables or .env files.

    Usage:
        settings = get_settings()
        print(settings.auth_backend)
        print(settings.db_url)
    """

    # Selection
    auth_backend: str = Field(default="db")
    encryption_type: str = Field(default="none")
    read_only: bool = Field(default=False)

    # Database backend
    db_url: str = Field(default="sqlite:///./authlayer.db")
    db_echo: bool = Field(default=False)
    db_create_tables: bool = Field(
        default=True,
        description="Create the credential table on first use if it does not exist.",
    )

    # Directory backend
    ldap_host: str = Field(default="localhost")
    ldap_port: int = Field(default=389, ge=1, le=65535)
    ldap_use_ssl: bool = Field(default=False)
    ldap_timeout: int = Field(default=10, ge=1)
    ldap_base_dn: str = Field(default="dc=example,dc=com")
    ldap_bind_dn: str = Field(default="")
    ldap_bind_password: str = Field(default="")
    ldap_login_attribute: str = Field(default="uid")
    ldap_object_classes: str = Field(default="inetOrgPerson")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("auth_backend", "encryption_type")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        """Backend and encryption names are looked up in lowercase."""
        return v.strip().lower()

    @property
    def ldap_object_classes_list(self) -> list[str]:
        """Parse comma-separated object classes into a list."""
        return [oc.strip() for oc in self.ldap_object_classes.split(",") if oc.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the process lifetime.
    For testing, clear the cache with: get_settings.cache_clear()

    Returns:
        Settings instance loaded from environment
    """
    return Settings()
