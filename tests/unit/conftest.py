import os
from pathlib import Path

import pytest


@pytest.fixture
def make_file(tmp_path):
    """Return a factory writing bytes to a file under tmp_path."""

    def _make_file(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make_file


@pytest.fixture
def umask():
    current = os.umask(0)
    os.umask(current)
    return current
