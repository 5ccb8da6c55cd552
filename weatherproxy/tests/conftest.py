"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from weatherproxy.config.schema import ServerConfig, UpstreamConfig
from weatherproxy.tests.support import FIXTURE_DIR, TEST_BASE_URL, load_fixture


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def short_term_payload() -> dict:
    return load_fixture("cwa_short_term_kinmen.json")


@pytest.fixture
def weekly_payload() -> dict:
    return load_fixture("cwa_weekly_kinmen.json")


@pytest.fixture
def config() -> ServerConfig:
    """Config with an API key, pointed at the test upstream."""
    return ServerConfig(
        api_key="test-key-123",
        upstream=UpstreamConfig(base_url=TEST_BASE_URL),
    )


@pytest.fixture
def keyless_config() -> ServerConfig:
    return ServerConfig(upstream=UpstreamConfig(base_url=TEST_BASE_URL))


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "port": 8080,
        "environment": "staging",
        "upstream": {"base_url": TEST_BASE_URL, "timeout_seconds": 5},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
