"""Root test configuration: isolate tests from local jsondelta configuration"""

import os

import pytest

from jsondelta.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Remove JSONDELTA_* env vars so only each test's own settings apply."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
