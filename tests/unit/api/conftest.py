"""Fixtures for route tests against an in-memory registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from university.api.app import create_app
from university.api.dependencies import get_registry

if TYPE_CHECKING:
    from fastapi import FastAPI

    from university.services import Registry


@pytest.fixture
def app(registry: Registry) -> FastAPI:
    """Create the app with the registry dependency overridden."""
    app = create_app(":memory:")

    def override_get_registry():
        yield registry

    app.dependency_overrides[get_registry] = override_get_registry
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client. The lifespan is not run."""
    return TestClient(app)
