import json
from typing import Any, Callable, Optional, Protocol

from google import genai
from google.genai import types
from loguru import logger

from .config import Settings, get_settings
from .types import BusinessContact

MISSING_KEY_MESSAGE = "API Key is missing. Please check your environment configuration."
FETCH_FAILED_MESSAGE = "Failed to fetch business data. Please try again."

SYSTEM_INSTRUCTION = "You are a helpful data extraction assistant. You always output valid JSON."


class LeadScoutError(Exception):
    """Base class for errors shown to the user."""


class ConfigurationError(LeadScoutError):
    pass


class LeadSearchError(LeadScoutError):
    pass


class LeadFinder(Protocol):
    def find_businesses(self, niche: str, location: str, count: int) -> list[BusinessContact]: ...


BUSINESS_LIST_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "name": types.Schema(type=types.Type.STRING, description="The name of the business"),
            "website": types.Schema(type=types.Type.STRING, description="The website URL of the business"),
            "phone": types.Schema(
                type=types.Type.STRING,
                description="Phone number if available, else null",
                nullable=True,
            ),
            "email": types.Schema(
                type=types.Type.STRING,
                description="Email address if available, else null",
                nullable=True,
            ),
            "address": types.Schema(
                type=types.Type.STRING,
                description="Physical address if available, else null",
                nullable=True,
            ),
            "description": types.Schema(
                type=types.Type.STRING,
                description="A brief 1 sentence description of what they do",
            ),
        },
        required=["name", "website", "description"],
    ),
)


def build_prompt(niche: str, location: str, count: int) -> str:
    return f"""
I need you to act as a lead generation research assistant.

Task: Find {count} real businesses for the niche "{niche}" located in or serving "{location}".

Instructions:
1. Use Google Search to find exactly {count} specific businesses matching this criteria.
2. For each business, extract the following details from the search results:
   - Business Name
   - Website URL
   - Phone Number (if visible in snippets/maps data)
   - Email Address (if visible in snippets)
   - Physical Address (if applicable)
   - Short description

Constraints:
- Return the data strictly as a JSON array matching the schema.
- If a specific field (like email) is not found in the search snippets, return null for that field.
- Ensure the websites are valid.
""".strip()


def build_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        tools=[types.Tool(google_search=types.GoogleSearch())],
        response_mime_type="application/json",
        response_schema=BUSINESS_LIST_SCHEMA,
        system_instruction=SYSTEM_INSTRUCTION,
    )


def parse_business_list(text: Optional[str]) -> list[BusinessContact]:
    """
    Parse the model's JSON array into contacts.
    Empty text means the model found nothing: that's zero results, not an error.
    """
    if not text or not text.strip():
        return []

    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    return [BusinessContact.from_dict(item) for item in data]


def _default_client(api_key: str) -> Any:
    return genai.Client(api_key=api_key)


class GeminiLeadFinder:
    """Finds businesses through Gemini with Google Search grounding."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Callable[[str], Any] = _default_client,
    ):
        self._settings = settings
        self._client_factory = client_factory

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def find_businesses(self, niche: str, location: str, count: int) -> list[BusinessContact]:
        settings = self.settings
        if not settings.gemini_api_key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        logger.info("Searching {} lead(s) for {!r} in {!r} ({})", count, niche, location, settings.model)

        try:
            client = self._client_factory(settings.gemini_api_key)
            response = client.models.generate_content(
                model=settings.model,
                contents=build_prompt(niche, location, count),
                config=build_config(),
            )
            contacts = parse_business_list(response.text)
        except Exception as exc:
            logger.opt(exception=exc).error("Gemini search failed: {}", exc)
            raise LeadSearchError(FETCH_FAILED_MESSAGE) from exc

        logger.info("Gemini returned {} lead(s)", len(contacts))
        return contacts
