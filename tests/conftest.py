"""Pytest configuration and shared fixtures for the zviz test suite."""

import os

import pytest
from hypothesis import Verbosity, settings

from zviz import Container

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "security: Tests for escaping and injection safety")


@pytest.fixture
def root() -> Container:
    """Provide an empty untagged root container."""
    return Container()
