from typing import Any

from loguru import logger

from .search import LeadFinder, LeadScoutError
from .types import DEFAULT_RESULT_COUNT, Failed, SearchParams, SearchState, Succeeded

MIN_RESULTS = 1
MAX_RESULTS = 50

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def clamp_count(value: Any) -> int:
    """Coerce the result count field into [1, 50]; unreadable input means the default."""
    try:
        n = int(value)
    except (TypeError, ValueError):
        return DEFAULT_RESULT_COUNT
    return max(MIN_RESULTS, min(MAX_RESULTS, n))


def can_submit(niche: str, location: str, state: SearchState) -> bool:
    if state.is_loading:
        return False
    return bool(niche) and bool(location)


def make_params(niche: str, location: str, count: Any) -> SearchParams:
    return SearchParams(niche=niche, location=location, count=clamp_count(count))


def run_search(finder: LeadFinder, params: SearchParams) -> SearchState:
    """Run one search to completion and return the next state. Never raises."""
    try:
        contacts = finder.find_businesses(params.niche, params.location, params.count)
    except LeadScoutError as exc:
        return Failed(params=params, error=str(exc))
    except Exception:
        logger.exception("Unexpected error while searching leads")
        return Failed(params=params, error=UNEXPECTED_ERROR_MESSAGE)

    return Succeeded(params=params, data=tuple(contacts))
