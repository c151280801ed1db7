"""Configuration management for the grant matcher."""

from typing import Optional
from pydantic import ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings


ENV_PREFIX = "GRANT_MATCHER_"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Config(BaseSettings):
    """Application configuration from environment variables."""

    # Catalog source (at most one; the seed catalog is used when neither is set)
    catalog_path: Optional[str] = None
    catalog_url: Optional[str] = None

    # Optional
    weights_path: Optional[str] = None
    request_timeout_seconds: float = 30.0
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_prefix": ENV_PREFIX, "case_sensitive": False}

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}, got '{v}'")
        return level

    @model_validator(mode="after")
    def single_catalog_source(self) -> "Config":
        if self.catalog_path and self.catalog_url:
            raise ValueError("catalog_path and catalog_url are mutually exclusive")
        return self


def validate_config() -> Config:
    """Load and validate configuration from environment.

    Raises ValueError with a message naming ALL invalid variables
    (not just the first one).
    """
    try:
        return Config()
    except ValidationError as exc:
        problems = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            name = f"{ENV_PREFIX}{field.upper()}" if field else "configuration"
            problems.append(f"{name}: {error['msg']}")
        raise ValueError(
            "Invalid environment configuration: " + "; ".join(problems) + ". "
            "Please fix them in your .env file or environment."
        ) from exc


def load_config() -> Config:
    """Load configuration from environment (startup entry point)."""
    return validate_config()
