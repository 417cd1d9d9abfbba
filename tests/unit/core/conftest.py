"""Shared fixtures for core unit tests"""

import json

import pytest


SAMPLE_LEFT = {
    "name": "John",
    "age": 30,
    "city": "New York",
    "hobbies": ["reading", "coding"],
}

SAMPLE_RIGHT = {
    "name": "John",
    "age": 31,
    "country": "USA",
    "hobbies": ["reading", "coding", "gaming"],
}


@pytest.fixture(name="sample_left")
def sample_left_fixture():
    return json.loads(json.dumps(SAMPLE_LEFT))


@pytest.fixture(name="sample_right")
def sample_right_fixture():
    return json.loads(json.dumps(SAMPLE_RIGHT))


@pytest.fixture(name="sample_files")
def sample_files_fixture(tmp_path):
    """Write the samples as indented JSON files and return (left_path, right_path)."""
    left = tmp_path / "left.json"
    right = tmp_path / "right.json"
    left.write_text(json.dumps(SAMPLE_LEFT, indent=2))
    right.write_text(json.dumps(SAMPLE_RIGHT, indent=2))
    return left, right
