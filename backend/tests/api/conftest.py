"""
Pytest fixtures for API integration tests.

Provides the FastAPI test client with the DIMS settings store redirected
to a temporary file.
"""
import pytest
from fastapi.testclient import TestClient

from dims_export.main import app
from dims_export.core.config import settings


@pytest.fixture(scope="function")
def settings_file(tmp_path, monkeypatch):
    """Point the settings store at a fresh temporary YAML file."""
    path = tmp_path / "dims_settings.yaml"
    monkeypatch.setattr(settings, "DIMS_SETTINGS_FILE", str(path))
    return path


@pytest.fixture(scope="function")
def client(settings_file):
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def api_prefix():
    return settings.API_V1_PREFIX


@pytest.fixture
def sample_records():
    """Capture records as posted by the acquisition layer."""
    return [
        {"part_number": "widget-b", "sequence": 1, "length_in": 1, "depth_in": 1,
         "height_in": 1, "weight_lb": 1, "time_stamp": "20240110_080000"},
        {"part_number": "Widget-A", "sequence": 5, "length_in": 99, "depth_in": 99,
         "height_in": 99, "weight_lb": 99, "time_stamp": "20240101_080000"},
        {"part_number": "WIDGET-A", "sequence": 2, "length_in": 10, "depth_in": 5,
         "height_in": 2, "weight_lb": 3, "time_stamp": "20240102_080000"},
        {"part_number": "", "sequence": 1},
    ]
