"""Pytest configuration and shared fixtures."""

import random

import pytest
from fastapi.testclient import TestClient

from main import app as fastapi_app
from models import GeometricParams
from services.layout_service import GridLayoutService
from services.palette_service import CellPalette


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def default_params():
    """Two columns, 10-unit insets and spacing."""
    return GeometricParams(column_count=2, left_inset=10, right_inset=10, cell_spacing=10)


@pytest.fixture
def seeded_palette():
    """Palette with a fixed random source."""
    return CellPalette(rng=random.Random(1234))


@pytest.fixture
def layout_service(seeded_palette):
    """GridLayoutService with a seeded palette."""
    return GridLayoutService(palette=seeded_palette)
