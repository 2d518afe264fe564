"""Shared test fixtures."""

from pathlib import Path

import pytest

from socialgod.config import Config
from socialgod.models import PersonaProfile
from socialgod.persona import default_persona
from socialgod.providers.mock import MockProvider, mock_script_payload
from socialgod.storage import LocalStore


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-llm-tests",
        action="store_true",
        default=False,
        help="Run LLM integration tests (expensive, makes real API calls)",
    )


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "llm_integration: mark test as requiring real Gemini calls"
    )


def pytest_collection_modifyitems(config, items):
    """Skip LLM tests unless --run-llm-tests is provided."""
    if not config.getoption("--run-llm-tests", default=False):
        skip_llm = pytest.mark.skip(
            reason="LLM integration tests skipped. Use --run-llm-tests to run."
        )
        for item in items:
            if "llm_integration" in item.keywords:
                item.add_marker(skip_llm)


@pytest.fixture
def test_config() -> Config:
    """Provide a test configuration."""
    return Config()


@pytest.fixture
def mock_config(tmp_path) -> Config:
    """Provide a test configuration with mock provider and a temp data dir."""
    config = Config()
    config.gemini.provider = "mock"
    config.paths.data_dir = str(tmp_path / "data")
    return config


@pytest.fixture
def mock_provider() -> MockProvider:
    """Provide a mock provider with default canned responses."""
    return MockProvider()


@pytest.fixture
def store(tmp_path) -> LocalStore:
    """Provide an empty local store."""
    return LocalStore(tmp_path / "store")


@pytest.fixture
def persona() -> PersonaProfile:
    """Provide the built-in persona."""
    return default_persona()


@pytest.fixture
def script_payload() -> dict:
    """Provide a canned script payload as the backend would return it."""
    return mock_script_payload()


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent
