"""
Global pytest configuration and fixtures for the fraps_linker test suite.
"""

import os
import sys

# Add project root to sys.path so 'fraps_linker' can be imported from a checkout
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI tests on CI."""
    _ = session
    _ = config

    if "CI" in os.environ or "GITHUB_ACTIONS" in os.environ:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)


@pytest.fixture
def make_captures(tmp_path):
    """Create empty files with the given names in tmp_path; returns tmp_path."""
    def _make(*names):
        for name in names:
            (tmp_path / name).write_bytes(b"")
        return tmp_path

    return _make

