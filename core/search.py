"""Free-text search and facet filtering over company records."""
from typing import Iterable, List, Mapping, Optional, Sequence

from models.company import CompanyRecord

DEFAULT_SEARCH_FIELDS = ('Company Name', 'Industry', 'Headquarters')

# Request parameter -> record field for the exact-match dropdowns
FACET_FIELDS = {
    'exchange': 'Exchange',
    'sector': 'Sector',
    'industry': 'Industry',
}


def matches_query(record: CompanyRecord, query: str,
                  search_fields: Optional[Sequence[str]] = DEFAULT_SEARCH_FIELDS) -> bool:
    """Case-insensitive substring match of query against record fields.

    Args:
        record: Company record to test
        query: Search term; blank matches everything
        search_fields: Fields to search, or None to search every value
    """
    needle = (query or '').strip().lower()
    if not needle:
        return True

    if search_fields is None:
        values = record.values()
    else:
        values = (record.get(name) for name in search_fields)

    return any(needle in value.lower() for value in values if value)


def matches_facets(record: CompanyRecord, facets: Optional[Mapping[str, str]]) -> bool:
    """Exact match (ignoring surrounding whitespace) on every selected facet.

    Empty selections pass through.
    """
    if not facets:
        return True
    return all(
        record.get(field_name).strip() == selected
        for field_name, selected in facets.items()
        if selected
    )


def filter_companies(records: Iterable[CompanyRecord], query: str = '',
                     facets: Optional[Mapping[str, str]] = None,
                     search_fields: Optional[Sequence[str]] = DEFAULT_SEARCH_FIELDS) -> List[CompanyRecord]:
    """Return records matching the text query AND all active facets, in order."""
    return [
        record for record in records
        if matches_query(record, query, search_fields) and matches_facets(record, facets)
    ]


def facet_values(records: Iterable[CompanyRecord], field_name: str) -> List[str]:
    """Distinct non-empty values of a field, stripped, in first-seen order."""
    seen = {}
    for record in records:
        value = record.get(field_name).strip()
        if value and value not in seen:
            seen[value] = True
    return list(seen)


def facets_from_params(params: Mapping[str, str]) -> dict:
    """Map request parameters (exchange, sector, industry) to field selections."""
    return {
        field_name: (params.get(param) or '').strip()
        for param, field_name in FACET_FIELDS.items()
        if (params.get(param) or '').strip()
    }
