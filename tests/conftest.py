import pytest
from fastapi.testclient import TestClient

from chirpy.api.main import create_app
from chirpy.config import Settings


@pytest.fixture
def static_root(tmp_path):
    """A small site for the fileserver: an index page and one asset."""
    (tmp_path / "index.html").write_text("<html><body><h1>Welcome to Chirpy</h1></body></html>")
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "logo.txt").write_text("chirpy logo")
    return tmp_path


@pytest.fixture
def settings(static_root):
    return Settings(db_url=None, filepath_root=str(static_root))


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
