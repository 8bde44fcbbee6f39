"""Shared fixtures and markers for radixcode tests."""

import uuid

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: repeated-encode throughput checks")


@pytest.fixture
def canonical_uuid():
    """The identifier with a known base36 encoding."""
    return uuid.UUID("eab02684-03a7-4d99-bd10-edd7bf2445ae")
