"""
Pytest configuration and fixtures
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from autofeedback.config import AutofeedbackConfig  # noqa: E402
from autofeedback.diagnostics import CollectingReporter  # noqa: E402
from autofeedback.validators import ValidatorDescriptor, ValidatorRegistry  # noqa: E402


def _starts_with(line, prefix):
    return line.startswith(prefix)


def _between(line, low, high):
    return low <= line <= high


@pytest.fixture
def reporter() -> CollectingReporter:
    return CollectingReporter()


@pytest.fixture
def registry() -> ValidatorRegistry:
    """Built-in validators plus a two-parameter one."""
    return ValidatorRegistry().extended(
        ValidatorDescriptor(
            name="starts_with",
            operator="^",
            arity=1,
            check=_starts_with,
            description="Checks the line starts with a prefix.",
            example="^:ab",
        ),
        ValidatorDescriptor(
            name="between",
            operator="<>",
            arity=2,
            check=_between,
            description="Checks the line sorts between two bounds.",
            example="<>:a:m",
        ),
    )


@pytest.fixture
def config() -> AutofeedbackConfig:
    return AutofeedbackConfig(max_lines=5)


@pytest.fixture
def client(config):
    from fastapi.testclient import TestClient

    from autofeedback.main import create_app

    return TestClient(create_app(config=config))
