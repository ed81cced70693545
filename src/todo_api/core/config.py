"""Application settings powered by ``pydantic-settings``."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Literal, Sequence

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

try:
    from .. import __version__ as package_version
except ImportError:  # pragma: no cover - fallback during early bootstrapping
    package_version = "0.1.0"


EnvironmentName = Literal["development", "test", "ci"]
PasswordScheme = Literal["pbkdf2_sha256", "legacy_sha256"]

_ENVIRONMENT_ALIASES: dict[str, EnvironmentName] = {
    "development": "development",
    "dev": "development",
    "test": "test",
    "testing": "test",
    "ci": "ci",
}

_ENVIRONMENT_PROFILES: dict[EnvironmentName, dict[str, Any]] = {
    "development": {
        "log_level": "DEBUG",
        "reload": True,
        "seed_demo_data": True,
    },
    "test": {
        "log_level": "WARNING",
        "reload": False,
        "seed_demo_data": False,
    },
    "ci": {
        "log_level": "INFO",
        "reload": False,
        "seed_demo_data": False,
    },
}


class Settings(BaseSettings):
    """Runtime configuration for the task board service."""

    model_config = SettingsConfigDict(
        env_prefix="TODO_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "Task Board API"
    environment: EnvironmentName = Field(default="development")
    api_prefix: str = Field(default="/api")
    version: str = Field(default=package_version)
    app_host: str = Field(default="0.0.0.0")
    app_port: int = Field(default=5000)
    log_level: str = Field(default="INFO")
    reload: bool = Field(default=True)

    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=False)
    cors_allow_methods: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])
    cors_allow_headers: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    upload_dir: Path = Field(default=Path("wwwroot") / "uploads")
    upload_url_prefix: str = Field(default="/uploads")

    password_scheme: PasswordScheme = Field(default="pbkdf2_sha256")
    password_salt: str = Field(default="todo-api-static-salt")
    password_min_length: int = Field(default=6)

    seed_demo_data: bool = Field(default=False)

    @field_validator("environment", mode="before")
    @classmethod
    def _normalise_environment(cls, value: object) -> EnvironmentName:
        if isinstance(value, str):
            normalized = value.strip().lower()
        else:
            normalized = ""
        if not normalized:
            normalized = "development"
        mapped = _ENVIRONMENT_ALIASES.get(normalized)
        if mapped is not None:
            return mapped
        return "development"

    @field_validator(
        "cors_allow_origins",
        "cors_allow_methods",
        "cors_allow_headers",
        mode="before",
    )
    @classmethod
    def _coerce_comma_separated(cls, value: object) -> list[str]:
        """Allow comma separated strings (or a JSON array) for CORS configuration."""

        if isinstance(value, str):
            stripped = value.strip()
            if stripped.startswith("["):
                value = json.loads(stripped)
            else:
                return [item.strip() for item in stripped.split(",") if item.strip()]
        if isinstance(value, Sequence):
            return [str(item) for item in value if str(item).strip()]
        return []

    @field_validator("upload_url_prefix", mode="before")
    @classmethod
    def _normalise_url_prefix(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip("/ "):
            return "/uploads"
        return "/" + value.strip("/ ")

    @field_validator("password_min_length", mode="before")
    @classmethod
    def _ensure_positive_length(cls, value: object) -> int:
        try:
            length = int(value)
        except (TypeError, ValueError):
            return 6
        return max(length, 1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        if not isinstance(value, str):
            return "INFO"
        return value.upper()

    @model_validator(mode="after")
    def _apply_environment_profile(self) -> "Settings":
        profile = _ENVIRONMENT_PROFILES[self.environment]
        fields_set = set(getattr(self, "model_fields_set", set()))
        for field_name, value in profile.items():
            if field_name not in fields_set:
                setattr(self, field_name, value)
        return self


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings()
