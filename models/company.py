"""Company record model."""
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional

NAME_FIELD = 'Company Name'


@dataclass(frozen=True, eq=False)
class CompanyRecord(Mapping):
    """One spreadsheet row, keyed by column header.

    Values are always strings; empty cells are ''. The record is read-only.
    """
    fields: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'fields', MappingProxyType(dict(self.fields)))

    def __getitem__(self, key: str) -> str:
        return self.fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, CompanyRecord):
            return dict(self.fields) == dict(other.fields)
        if isinstance(other, Mapping):
            return dict(self.fields) == dict(other)
        return NotImplemented

    def get(self, key: str, default: str = '') -> str:
        return self.fields.get(key, default)

    @property
    def name(self) -> str:
        """Company name, the de facto key for lookups and routing."""
        return self.get(NAME_FIELD)

    @property
    def slug(self) -> str:
        """URL path segment identifying this company."""
        from core.routing import encode_company_name
        return encode_company_name(self.name)

    def to_dict(self) -> Dict[str, str]:
        return dict(self.fields)

    @classmethod
    def from_row(cls, row: Mapping[Optional[str], Any]) -> 'CompanyRecord':
        """Create a record from a parsed row dict, dropping unlabelled cells."""
        return cls({
            key: '' if value is None else str(value)
            for key, value in row.items()
            if key
        })
