"""
Pytest configuration and shared fixtures for cartonsdk tests.
"""

import shutil

import pytest

# Import test fixtures to make them available to all tests
# ruff: noqa: F401
from tests.fixtures.toolchains import (
    fake_home,
    swiftenv_root,
    sdk_root,
    project_dir,
)

from cartonsdk.core.platform import clear_platform_cache


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )
    config.addinivalue_line(
        "markers", "requires_tar: needs a tar executable on PATH"
    )


def pytest_runtest_setup(item):
    """Skip tests that unpack archives when tar is unavailable."""
    if "requires_tar" in item.keywords and shutil.which("tar") is None:
        pytest.skip("tar executable not available")


@pytest.fixture(autouse=True)
def reset_platform_cache():
    """Clear the cached platform family between tests."""
    clear_platform_cache()
    yield
    clear_platform_cache()
