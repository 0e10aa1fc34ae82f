"""Test configuration and fixtures for recursive_compare."""

import pytest

from recursive_compare.configuration import RecursiveComparisonConfiguration


@pytest.fixture
def configuration():
    return RecursiveComparisonConfiguration()
