"""Load result states passed from the data source to the pages.

A page is always in exactly one of three states: still waiting on the
spreadsheet (``Loading``), terminally failed (``Failed``) or holding the
normalized records (``Ready``).
"""
from dataclasses import dataclass, field
from typing import List, Union

from models.company import CompanyRecord


@dataclass(frozen=True)
class Loading:
    """The spreadsheet fetch has not completed yet."""

    @property
    def is_ready(self) -> bool:
        return False


@dataclass(frozen=True)
class Failed:
    """Fetching, parsing or lookup failed; nothing is rendered but the reason."""
    reason: str
    status_code: int = 502

    @property
    def is_ready(self) -> bool:
        return False


@dataclass(frozen=True)
class Ready:
    """Records were loaded and normalized."""
    records: List[CompanyRecord] = field(default_factory=list)

    @property
    def is_ready(self) -> bool:
        return True


LoadResult = Union[Loading, Failed, Ready]
