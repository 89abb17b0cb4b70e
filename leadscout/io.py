import re
from typing import Iterable, Optional

import pandas as pd

from .types import BusinessContact

CSV_HEADERS = ["Business Name", "Website", "Phone", "Email", "Address", "Description"]
TABLE_COLUMNS = ["Business", "Address", "Email", "Phone", "Website", "Description"]

ADDRESS_PREVIEW_LEN = 25
DESCRIPTION_PREVIEW_LEN = 80
MISSING = "N/A"


def _quote(value: Optional[str]) -> str:
    # Every field is quoted; embedded quotes are doubled so names like
    # 'Joe "The Plumber"' stay in one column.
    return '"' + (value or "").replace('"', '""') + '"'


def contacts_to_csv(contacts: Iterable[BusinessContact]) -> Optional[str]:
    """CSV text for the export download, or None when there is nothing to export."""
    rows = [
        ",".join(
            _quote(v)
            for v in (c.name, c.website, c.phone, c.email, c.address, c.description)
        )
        for c in contacts
    ]
    if not rows:
        return None
    return "\n".join([",".join(CSV_HEADERS), *rows])


def _underscore(s: str) -> str:
    return re.sub(r"\s+", "_", s)


def export_filename(niche: str, location: str) -> str:
    return f"leads_{_underscore(niche)}_{_underscore(location)}.csv"


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def contact_row(contact: BusinessContact) -> dict:
    """
    One display row of the results table.
    Email and phone carry mailto:/tel: targets for link columns; "N/A" when absent.
    """
    return {
        "Business": contact.name,
        "Address": _truncate(contact.address, ADDRESS_PREVIEW_LEN) if contact.address else "",
        "Email": f"mailto:{contact.email}" if contact.email else MISSING,
        "Phone": f"tel:{contact.phone}" if contact.phone else MISSING,
        "Website": contact.website,
        "Description": _truncate(contact.description, DESCRIPTION_PREVIEW_LEN),
    }


def contacts_to_frame(contacts: Iterable[BusinessContact]) -> pd.DataFrame:
    df = pd.DataFrame([contact_row(c) for c in contacts])
    if df.empty:
        df = pd.DataFrame(columns=TABLE_COLUMNS)
    return df
