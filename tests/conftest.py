"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from learnio.core.config import Settings
from learnio.main import create_app


@pytest.fixture
def upload_dir(tmp_path):
    """Temporary storage root so tests never touch public/images."""
    path = tmp_path / "images"
    path.mkdir()
    return path


@pytest.fixture
def app_settings(upload_dir):
    """Settings pointing at the temporary storage root."""
    return Settings(
        UPLOAD_DIR=str(upload_dir),
        CORS_ORIGINS="http://localhost:5173,https://learnio-psi.vercel.app",
    )


@pytest.fixture
def client(app_settings):
    """Create test client."""
    return TestClient(create_app(app_settings))
