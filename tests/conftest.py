# tests/conftest.py
# This file is part of vectorclock - Causal ordering for distributed events
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the vector clock tests.

Puts the project root on ``sys.path`` so the tests run against the working
tree without installation, and resets the global logger between tests.
"""

import sys
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from vectorclock import VectorClock  # noqa: E402
from vectorclock.utils.logger import LogLevel, get_logger, set_log_level  # noqa: E402


@pytest.fixture
def sample_processes():
    """Provide standard process set for testing.

    Returns:
        List[str]: Common process identifiers for test scenarios
    """
    return ["P1", "P2", "P3"]


@pytest.fixture
def empty_clock():
    return VectorClock()


@pytest.fixture(autouse=True)
def restore_log_level():
    """Reset the global logger to its quiet default after each test."""
    yield
    get_logger().detach_console()
    set_log_level(LogLevel.WARNING)
