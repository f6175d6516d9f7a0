"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path
from typing import Dict, Any


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_user_json() -> Dict[str, Any]:
    """Sample nested user document for testing."""
    return {
        "user": {
            "name": "John",
            "email": "john@example.com",
            "address": {
                "city": "NYC",
                "zip": "10001"
            },
            "tags": ["admin", "staff"]
        },
        "active": True,
        "score": 9.5
    }


@pytest.fixture
def sample_list_json() -> Dict[str, Any]:
    """Sample document holding an array of objects."""
    return {
        "items": [
            {"id": 1, "name": "Item 1", "value": 100},
            {"id": 2, "name": "Item 2", "value": 200},
            {"id": 3, "name": "Item 3", "value": 300},
        ]
    }


@pytest.fixture
def sample_mixed_json() -> Dict[str, Any]:
    """Sample document with heterogeneous arrays and nulls."""
    return {
        "metadata": {
            "version": "1.0",
            "created": "2024-01-01",
            "author": None
        },
        "data": [
            {"type": "A", "values": [1, 2, 3]},
            "plain",
            42,
            {"type": "B", "values": [4, 5, 6]},
        ],
        "config": {
            "enabled": True,
            "settings": {
                "timeout": 30,
                "retries": None
            }
        }
    }


@pytest.fixture
def sample_json_file(temp_dir, sample_user_json) -> Path:
    """Write the sample user document to a file."""
    path = temp_dir / "user.json"
    path.write_text(json.dumps(sample_user_json), encoding="utf-8")
    return path


@pytest.fixture
def mixed_json_file(temp_dir, sample_mixed_json) -> Path:
    """Write the sample mixed document to a file."""
    path = temp_dir / "mixed.json"
    path.write_text(json.dumps(sample_mixed_json), encoding="utf-8")
    return path
