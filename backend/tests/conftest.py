from datetime import datetime, timezone
from pathlib import Path

import pytest

from kubelens.services.k8s.loader import load_manifest_file
from kubelens.services.resources import convert_all

FIXTURES = Path(__file__).parent / "fixtures"

# Fixed reference instant so ages are reproducible
NOW = datetime(2023, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def convert_resource_from_file():
    """Load a fixture manifest and convert it; returns (records, raw objects)."""

    def _convert(name, resource_cls, at=NOW):
        raw = load_manifest_file(FIXTURES / f"{name}.yaml", resource_cls)
        return convert_all(resource_cls, raw, now=at), raw

    return _convert
