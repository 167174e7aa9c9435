"""Pytest configuration and shared fixtures"""
from types import MappingProxyType

import pytest
from fastapi.testclient import TestClient

from measurement_converter.api.conversion import get_converter
from measurement_converter.conversion import (
    LinearConverter,
    MeasurementConverter,
    TemperatureConverter,
)
from measurement_converter.main import app
from measurement_converter.matching import UnitSuggester


@pytest.fixture
def converter():
    """Converter with explicit defaults, independent of environment settings"""
    return MeasurementConverter(
        default_precision=4,
        default_rounding_mode="round",
        suggester=UnitSuggester(threshold=0.5, max_suggestions=3)
    )


@pytest.fixture
def linear_converter():
    return LinearConverter()


@pytest.fixture
def temperature_converter():
    return TemperatureConverter()


@pytest.fixture
def mock_table():
    """Small factor table with base unit 'a'"""
    return MappingProxyType({"a": 1, "b": 2, "c": 0.5})


@pytest.fixture(scope="function")
def client(converter):
    """Create FastAPI test client with a test converter"""
    app.dependency_overrides[get_converter] = lambda: converter

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
