import json
from types import SimpleNamespace

import pytest
from google.genai import types
from loguru import logger

from leadscout.config import Settings
from leadscout.search import (
    FETCH_FAILED_MESSAGE,
    MISSING_KEY_MESSAGE,
    ConfigurationError,
    GeminiLeadFinder,
    LeadSearchError,
    build_config,
    build_prompt,
    parse_business_list,
)
from leadscout.types import BusinessContact


class FakeModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.requests = []

    def generate_content(self, *, model, contents, config):
        self.requests.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def _finder(models, api_key="test-key"):
    settings = Settings(gemini_api_key=api_key, model="gemini-test")
    keys = []

    def factory(key):
        keys.append(key)
        return SimpleNamespace(models=models)

    return GeminiLeadFinder(settings=settings, client_factory=factory), keys


PAYLOAD = [
    {
        "name": "Acme",
        "website": "https://acme.com",
        "phone": None,
        "email": None,
        "address": None,
        "description": "Widgets",
    },
    {
        "name": "Lakeview Roofing",
        "website": "https://lakeviewroofing.example",
        "phone": "+1 312 555 0199",
        "email": "info@lakeviewroofing.example",
        "address": "1200 W Belmont Ave, Chicago, IL",
        "description": "Residential roof repair and replacement.",
    },
]


def test_parse_business_list_keeps_order_and_nulls():
    contacts = parse_business_list(json.dumps(PAYLOAD))

    assert [c.name for c in contacts] == ["Acme", "Lakeview Roofing"]
    assert contacts[0].phone is None
    assert contacts[0].email is None
    assert contacts[1].address == "1200 W Belmont Ave, Chicago, IL"


def test_parse_business_list_treats_missing_optional_fields_as_none():
    contacts = parse_business_list('[{"name": "A", "website": "https://a.example", "description": "d"}]')

    assert contacts == [BusinessContact(name="A", website="https://a.example", description="d")]


@pytest.mark.parametrize("text", [None, "", "   \n"])
def test_parse_business_list_empty_text_is_zero_results(text):
    assert parse_business_list(text) == []


def test_parse_business_list_rejects_non_array():
    with pytest.raises(ValueError):
        parse_business_list('{"name": "Acme"}')


def test_build_prompt_embeds_search_parameters():
    prompt = build_prompt("Dentists", "Chicago", 7)

    assert 'Find 7 real businesses for the niche "Dentists" located in or serving "Chicago"' in prompt
    assert "find exactly 7 specific businesses" in prompt
    assert "return null for that field" in prompt


def test_build_config_enables_grounding_and_json_schema():
    cfg = build_config()

    assert cfg.response_mime_type == "application/json"
    assert cfg.tools[0].google_search is not None
    schema = cfg.response_schema
    assert schema.type == types.Type.ARRAY
    assert schema.items.required == ["name", "website", "description"]
    assert schema.items.properties["email"].nullable is True
    assert not schema.items.properties["name"].nullable


def test_find_businesses_returns_contacts():
    models = FakeModels(text=json.dumps(PAYLOAD))
    finder, keys = _finder(models)

    contacts = finder.find_businesses("Roofers", "Chicago", 2)

    assert len(contacts) == 2
    assert keys == ["test-key"]
    request = models.requests[0]
    assert request["model"] == "gemini-test"
    assert '"Roofers"' in request["contents"]


def test_find_businesses_empty_response_is_not_an_error():
    finder, _ = _finder(FakeModels(text=None))

    assert finder.find_businesses("Roofers", "Chicago", 5) == []


def test_find_businesses_requires_api_key():
    models = FakeModels(text="[]")
    finder, keys = _finder(models, api_key="")

    with pytest.raises(ConfigurationError) as excinfo:
        finder.find_businesses("Roofers", "Chicago", 5)

    assert str(excinfo.value) == MISSING_KEY_MESSAGE
    assert keys == []
    assert models.requests == []


def test_find_businesses_hides_transport_errors():
    messages = []
    sink_id = logger.add(messages.append, level="ERROR")
    try:
        finder, _ = _finder(FakeModels(error=RuntimeError("socket closed by peer")))
        with pytest.raises(LeadSearchError) as excinfo:
            finder.find_businesses("Roofers", "Chicago", 5)
    finally:
        logger.remove(sink_id)

    assert str(excinfo.value) == FETCH_FAILED_MESSAGE
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert any("socket closed by peer" in m for m in messages)


def test_find_businesses_wraps_malformed_json():
    finder, _ = _finder(FakeModels(text="not json at all"))

    with pytest.raises(LeadSearchError) as excinfo:
        finder.find_businesses("Roofers", "Chicago", 5)

    assert str(excinfo.value) == FETCH_FAILED_MESSAGE
