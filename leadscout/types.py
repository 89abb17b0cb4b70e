from dataclasses import dataclass, field
from typing import Optional, Union

DEFAULT_RESULT_COUNT = 10


@dataclass(frozen=True)
class BusinessContact:
    name: str
    website: str
    description: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

    @classmethod
    def from_dict(cls, item: dict) -> "BusinessContact":
        """Build a contact from one object of the model's JSON array."""
        return cls(
            name=str(item["name"]),
            website=str(item["website"]),
            description=str(item["description"]),
            phone=_optional_text(item.get("phone")),
            email=_optional_text(item.get("email")),
            address=_optional_text(item.get("address")),
        )


def _optional_text(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class SearchParams:
    niche: str
    location: str
    count: int = DEFAULT_RESULT_COUNT


# ----------------------------
# Search state
# ----------------------------
# One record per session, replaced wholesale on every transition:
#   Idle -> Loading -> Succeeded | Failed -> Loading -> ...
@dataclass(frozen=True)
class Idle:
    is_loading = False
    error = None
    search_performed = False

    @property
    def data(self) -> tuple:
        return ()


@dataclass(frozen=True)
class Loading:
    params: SearchParams
    is_loading = True
    error = None
    search_performed = False

    @property
    def data(self) -> tuple:
        return ()


@dataclass(frozen=True)
class Succeeded:
    params: SearchParams
    data: tuple[BusinessContact, ...] = field(default_factory=tuple)
    is_loading = False
    error = None
    search_performed = True


@dataclass(frozen=True)
class Failed:
    params: SearchParams
    error: str
    is_loading = False
    search_performed = True

    @property
    def data(self) -> tuple:
        return ()


SearchState = Union[Idle, Loading, Succeeded, Failed]
