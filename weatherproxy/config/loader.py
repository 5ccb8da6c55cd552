"""Config loader: optional YAML file overlaid with environment variables."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from weatherproxy.config.schema import ServerConfig

# Environment variable -> top-level config key
ENV_OVERRIDES = {
    "CWA_API_KEY": "api_key",
    "PORT": "port",
    "APP_ENV": "environment",
}


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ServerConfig:
    """Load and validate config.

    A missing or empty YAML file yields the defaults. Non-empty environment
    variables listed in ENV_OVERRIDES take precedence over the file.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}

    if environ is None:
        environ = os.environ
    for env_name, key in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            raw[key] = value

    return ServerConfig(**raw)


def masked_config_json(config: ServerConfig) -> str:
    """Render the config as JSON for display; SecretStr masks the API key."""
    return config.model_dump_json(indent=2)
