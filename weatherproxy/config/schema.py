"""Pydantic v2 configuration schema, frozen once loaded."""

from pydantic import BaseModel, Field, SecretStr

from weatherproxy.config.defaults import (
    CWA_BASE_URL,
    DEFAULT_LOCATION,
    SHORT_TERM_DATASET,
    WEEKLY_DATASET,
    WEEKLY_ELEMENT_NAME,
)


class UpstreamConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    base_url: str = CWA_BASE_URL
    short_term_dataset: str = SHORT_TERM_DATASET
    weekly_dataset: str = WEEKLY_DATASET
    weekly_element_name: str = WEEKLY_ELEMENT_NAME
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    api_key: SecretStr | None = None
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    environment: str = "development"  # informational only
    default_location: str = DEFAULT_LOCATION
    cors_origins: list[str] = ["*"]
    allow_partial_results: bool = False
    upstream: UpstreamConfig = UpstreamConfig()

    def api_key_value(self) -> str | None:
        if self.api_key is None:
            return None
        return self.api_key.get_secret_value() or None
