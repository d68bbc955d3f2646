# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Pytest configuration and shared fixtures.

Assumptions:
- Tests run with the default generation policy unless they opt into
  fast_policy
- Logging is reconfigured per test so handlers write to the live stderr
"""
import pytest

from secpass.config import settings
from secpass.logging_config import clear_context, configure_logging


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast, isolated tests")
    config.addinivalue_line("markers", "hypothesis: property-based tests")
    config.addinivalue_line("markers", "slow: timing-sensitive tests (deselect with -m \"not slow\")")


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Reset logging before each test.

    Assumptions:
    - JSON output at DEBUG level so every event is emitted
    - Bound context never leaks between tests
    """
    configure_logging(log_level="DEBUG", json_output=True)
    yield
    clear_context()


@pytest.fixture
def fast_policy(monkeypatch):
    """Shrink the generated iteration range so hashing is quick.

    Example:
        def test_something(fast_policy):
            stored = hash_password("pw")  # uses 1..16 iterations
    """
    monkeypatch.setattr(settings, "min_iterations", 1)
    monkeypatch.setattr(settings, "max_iterations", 16)


@pytest.fixture
def crafted_artifact():
    """Builder for hand-made artifacts.

    Returns:
        Callable: (password, iteration_count, width=4) -> base64 text
    """
    from tests.fixtures.sample_artifacts import build_artifact
    return build_artifact
