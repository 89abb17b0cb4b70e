import pytest

from leadscout import config
from leadscout.types import BusinessContact


class FakeFinder:
    """Stands in for GeminiLeadFinder; records calls and replays a canned result."""

    def __init__(self, result=None, error=None):
        self.result = result or []
        self.error = error
        self.calls = []

    def find_businesses(self, niche, location, count):
        self.calls.append((niche, location, count))
        if self.error is not None:
            raise self.error
        return list(self.result)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture
def acme():
    return BusinessContact(
        name="Acme",
        website="https://acme.com",
        description="Widgets",
    )


@pytest.fixture
def contacts(acme):
    return [
        acme,
        BusinessContact(
            name="Bright Smiles Dental",
            website="https://brightsmiles.example",
            description="Family dentistry and cosmetic care in the Loop.",
            phone="(312) 555-0142",
            email="hello@brightsmiles.example",
            address="233 S Wacker Dr, Chicago, IL 60606",
        ),
    ]
