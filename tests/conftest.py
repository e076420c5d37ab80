from __future__ import annotations

from functools import lru_cache
import importlib.util

import pytest

from stringcodable import DynamicValue


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers to avoid pytest warnings."""
    config.addinivalue_line("markers", "yaml: requires pyyaml.")
    config.addinivalue_line("markers", "toon: requires python-toon.")


@lru_cache(maxsize=1)
def _has_yaml() -> bool:
    """Return True if pyyaml is importable."""
    return importlib.util.find_spec("yaml") is not None


@lru_cache(maxsize=1)
def _has_toon() -> bool:
    """Return True if python-toon is importable."""
    return importlib.util.find_spec("toon") is not None


def pytest_runtest_setup(item: pytest.Item) -> None:
    """Skip tests whose optional format backend is not installed."""
    if "yaml" in item.keywords and not _has_yaml():
        pytest.skip("pyyaml is unavailable.")
    if "toon" in item.keywords and not _has_toon():
        pytest.skip("python-toon is unavailable.")


@pytest.fixture
def sample_payload() -> dict[str, object]:
    """Pre-stringified payload mixing every shape."""
    return {
        "boolean": "true",
        "integer": "1",
        "double": "3.14",
        "string": "string",
        "array": ["1", "2", "3"],
        "nested": {"a": "alpha", "b": "bravo", "c": "charlie"},
        "missing": None,
    }


@pytest.fixture
def sample_value(sample_payload: dict[str, object]) -> DynamicValue:
    return DynamicValue(sample_payload)
