"""Grouping of record fields into detail page sections."""
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from core.extraction import format_currency
from models.company import CompanyRecord


@dataclass(frozen=True)
class Section:
    """A titled block of (label, value) rows on the detail page."""
    key: str
    title: str
    rows: List[Tuple[str, str]] = field(default_factory=list)


# (key, title, fields, value formatter)
SECTION_LAYOUT: List[Tuple[str, str, Tuple[str, ...], Optional[Callable[[str], str]]]] = [
    ('general', 'General Information',
     ('Industry', 'Headquarters', 'Founding Year', 'Number of Employees'), None),
    ('financial', 'Financial Information',
     ('Funding Raised', 'Revenue', 'Company Valuation', 'Current Valuation'), format_currency),
    ('market', 'Market Information',
     ('Exchange', 'Ticker Symbol', 'Sector', 'Growth Potential Score', 'Risk Level'), None),
    ('people', 'Key People',
     ('Founders & LinkedIn URLs', 'Key Contacts'), None),
    ('social', 'Connect',
     ('Social Media Links',), None),
]


def build_sections(record: CompanyRecord) -> List[Section]:
    """Build detail sections, keeping only fields with a value."""
    sections = []
    for key, title, fields, formatter in SECTION_LAYOUT:
        rows = []
        for name in fields:
            value = record.get(name)
            if not value:
                continue
            rows.append((name, formatter(value) if formatter else value))
        sections.append(Section(key=key, title=title, rows=rows))
    return sections
