"""Shared fixtures for DEMOCLICK tests."""

import importlib.util
from pathlib import Path

import pytest
from loguru import logger

TESTS_PATH = Path(__file__).parent
FIXTURES_PATH = TESTS_PATH / "fixtures"
SCRIPTS_PATH = TESTS_PATH.parent / "scripts"


def _make_block(
    timestamp: str = "Jan 05 10:30:00",
    metadata: str = '{"customIDs":{"workspaceId":"w_123"}}',
    url: str = "https://calendly.com/jane-doe-demo/30min",
) -> list[str]:
    """Six raw lines for one event."""
    return [timestamp, "book_demo_click", "web", metadata, url, "Chrome 120"]


def _load_script(name: str):
    """Import a script from scripts/ as a module."""
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_PATH / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def make_block():
    """Factory for the raw lines of one event."""
    return _make_block


@pytest.fixture
def load_script():
    """Loader for scripts/ modules."""
    return _load_script


@pytest.fixture
def raw_click_log() -> str:
    """Realistic paste: header noise, blank separators, three events."""
    return (FIXTURES_PATH / "raw_click_log.txt").read_text(encoding="utf-8")


@pytest.fixture
def raw_click_log_path() -> Path:
    return FIXTURES_PATH / "raw_click_log.txt"


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop loguru sinks added during a test (they may point at closed streams)."""
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    """Ignore any PARSE_CONFIG_PATH from the developer's .env."""
    monkeypatch.delenv("PARSE_CONFIG_PATH", raising=False)
