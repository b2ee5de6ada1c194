"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from zerobudget.main import app


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Keep preferences written by tests out of the real config directory."""
    monkeypatch.setenv("BUDGET_DATA_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    with TestClient(app) as c:
        yield c
