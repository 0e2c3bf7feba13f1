"""
Configuration models for imgsign using Pydantic v2 Settings.

Values are read from ``IMGSIGN_*`` environment variables (nested groups use
``__``, e.g. ``IMGSIGN_CORE__INTERNAL_LOGGING_ENABLED``) or passed directly.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import (  # type: ignore[import-not-found]
    BaseSettings,
    SettingsConfigDict,
)

from .codec import hex_decode
from .signer import DIGEST_SIZE, Credentials


class CoreSettings(BaseSettings):
    """Library-internal behaviour toggles."""

    internal_logging_enabled: bool = Field(
        default=False,
        description="Emit DEBUG/WARN diagnostics through the 'imgsign' logger",
    )

    model_config = SettingsConfigDict(
        env_prefix="IMGSIGN_CORE__",
        extra="ignore",
        case_sensitive=False,
    )


class ImgSignSettings(BaseSettings):
    """Endpoint, signing credentials and URL defaults."""

    endpoint: str | None = Field(default=None, description="Proxy base URL")
    key: str | None = Field(default=None, description="Hex-encoded signing key")
    salt: str | None = Field(default=None, description="Hex-encoded signing salt")
    signature_size: int = Field(
        default=DIGEST_SIZE,
        ge=1,
        le=DIGEST_SIZE,
        description="Number of HMAC digest bytes kept in the signature",
    )
    dialect: Literal["keyed", "legacy"] = Field(
        default="keyed",
        description="URL dialect: keyed directives or legacy positional ones",
    )
    encode: bool = Field(
        default=False,
        description="Base64url-encode source URLs by default",
    )

    core: CoreSettings = Field(default_factory=CoreSettings)

    model_config = SettingsConfigDict(
        env_prefix="IMGSIGN_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("endpoint", "key", "salt", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("key", "salt")
    @classmethod
    def _ensure_hex(cls, value: str | None) -> str | None:
        if value is not None:
            # FormatError is a ValueError, so pydantic reports it per field
            hex_decode(value)
        return value

    @model_validator(mode="after")
    def _ensure_key_and_salt_pair(self) -> ImgSignSettings:
        if (self.key is None) != (self.salt is None):
            raise ValueError("key and salt must be configured together")
        return self

    def credentials(self) -> Credentials | None:
        """Return decoded credentials, or None for insecure mode."""
        if self.key is None or self.salt is None:
            return None
        return Credentials.from_hex(self.key, self.salt)


__all__ = ["CoreSettings", "ImgSignSettings"]
