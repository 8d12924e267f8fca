"""Shared fixtures: a fresh application (and state) per test"""
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from main import create_app


@pytest.fixture
def settings():
    """Default settings, independent of the process environment"""
    return Settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def platform(app):
    """The PlatformState behind the app under test"""
    return app.state.platform
