"""Pytest configuration and shared fixtures for Diecast Scanner tests."""

import json

import pytest

from diecast_scanner.core.types import DiecastCar


@pytest.fixture(scope="function")
def box_text():
    """OCR text of a typical Hot Wheels blister card."""
    return """
      HOT WHEELS
      PORSCHE 911 GT3
      1:64 SCALE
      HKC27
    """


@pytest.fixture(scope="function")
def sample_cars():
    """A small collection spanning several makes."""
    return [
        DiecastCar(id="c1", brand="Nissan", model="Skyline GT-R R34", scale="1:64",
                   condition="Mint", notes="MINIGT #12"),
        DiecastCar(id="c2", brand="Porsche", model="911 GT3", scale="1:64",
                   condition="Mint", notes="Model ID: HKC27"),
        DiecastCar(id="c3", brand="Ferrari", model="F40", scale="1:43",
                   condition="Loose"),
    ]


@pytest.fixture(scope="function")
def collection_data():
    """Decoded collection export document."""
    return {
        "exportedAt": "2024-05-01T10:00:00.000Z",
        "cars": [
            {"id": "c1", "brand": "Nissan", "model": "Skyline GT-R R34", "scale": "1:64",
             "condition": "Mint", "notes": "MINIGT #12"},
            {"id": "c2", "brand": "Porsche", "model": "911 GT3", "scale": "1:64",
             "condition": "Mint", "notes": "Model ID: HKC27",
             "imageUrl": "file:///photos/c2.jpg", "year": "2023"},
            {"id": "c3", "brand": "Ferrari", "model": "F40", "scale": "1:43",
             "condition": "Loose"},
        ],
        "customBrands": ["Kyosho", "Hot Wheels"],
    }


@pytest.fixture(scope="function")
def collection_file(tmp_path, collection_data):
    """Collection export written to a temporary JSON file."""
    path = tmp_path / "MyDiecast_Collection.json"
    path.write_text(json.dumps(collection_data, indent=2), encoding="utf-8")
    return path


# Configure pytest options
def pytest_configure(config):
    """Configure pytest with custom options."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "integration" in item.name.lower() or "Integration" in str(item.cls):
            item.add_marker(pytest.mark.integration)

        if not item.get_closest_marker('integration') and not item.get_closest_marker('slow'):
            item.add_marker(pytest.mark.unit)
