"""Pytest configuration and fixtures for fieldknobs tests."""

import shutil
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp)


@pytest.fixture
def sample_validators_config():
    """Sample validator configuration, as it would be loaded from a file."""
    return {
        "validators": {
            "username": {
                "type": "string",
                "regex_pattern": "USERNAME",
                "min_string_length": 3,
                "max_string_length": 20,
            },
            "full_name": {
                "type": "string",
                "min_words_count": 2,
                "max_words_count": 4,
                "is_required_error": "Please enter your name",
            },
            "age": {
                "type": "number",
                "min_value": 13,
                "max_value": 120,
                "is_integer": True,
            },
        }
    }
