import pytest
from fastapi.testclient import TestClient

from app.database import JsonFileStore, get_store
from app.main import app


@pytest.fixture
def json_store(tmp_path):
    """Empty JSON file store in a temp directory."""
    return JsonFileStore(str(tmp_path / "signal.json"))


@pytest.fixture
def client(json_store):
    """Test client wired to the temp JSON store."""
    app.dependency_overrides[get_store] = lambda: json_store
    yield TestClient(app)
    app.dependency_overrides.clear()
