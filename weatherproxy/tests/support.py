"""Constants and loaders shared by tests that mock the CWA API."""

import json
from pathlib import Path

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-cwa.example.com/api"
SHORT_TERM_URL = f"{TEST_BASE_URL}/v1/rest/datastore/F-C0032-001"
WEEKLY_URL = f"{TEST_BASE_URL}/v1/rest/datastore/F-D0047-089"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name, encoding="utf-8") as f:
        return json.load(f)
