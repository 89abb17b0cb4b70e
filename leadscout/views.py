from enum import Enum

from .types import SearchState


class View(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    TABLE = "table"


def select_view(state: SearchState) -> View:
    """Exactly one view per state; the empty state only after a completed, error-free search."""
    if state.is_loading:
        return View.LOADING
    if state.error:
        return View.ERROR
    if not state.search_performed:
        return View.IDLE
    if not state.data:
        return View.EMPTY
    return View.TABLE
