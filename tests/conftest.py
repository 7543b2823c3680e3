import os
import sys

import pytest
from loguru import logger

# Configure loguru for tests
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    level="DEBUG",
)

OVERPASS_TEST_URL = "https://overpass.test/api/interpreter"
SETTINGS_ENV_VARS = ("OVERPASS_URL", "ADMINBOUNDS_OUT_DIR", "OVERPASS_TIMEOUT")


@pytest.fixture
def overpass_url() -> str:
    return OVERPASS_TEST_URL


@pytest.fixture
def clean_env(monkeypatch):
    """Strip settings-related environment variables so tests see defaults"""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield monkeypatch
    # load_dotenv writes straight to os.environ
    for var in SETTINGS_ENV_VARS:
        os.environ.pop(var, None)


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "http: tests that stub Overpass over HTTP")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests using the requests_mock fixture"""
    http_marker = pytest.mark.http
    for item in items:
        if "requests_mock" in getattr(item, "fixturenames", ()):
            item.add_marker(http_marker)
