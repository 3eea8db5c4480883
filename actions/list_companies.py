"""Company directory listing action."""
import logging
from typing import Dict, Any

from actions.base import BaseAction
from core.search import (
    DEFAULT_SEARCH_FIELDS,
    FACET_FIELDS,
    facet_values,
    facets_from_params,
    filter_companies,
)

logger = logging.getLogger(__name__)


class ListCompaniesAction(BaseAction):
    """Search and filter the company directory."""

    name = 'LIST_COMPANIES'
    description = 'List companies, filtered by free-text query (q) and exchange/sector/industry facets'
    template = 'companies.html'

    def execute(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        state = self.load_state()
        if not state.is_ready:
            return self.failure(state)

        query = (parameters.get('q') or '').strip()
        facets = facets_from_params(parameters)
        # scope=all searches every column instead of name/industry/headquarters
        search_fields = None if parameters.get('scope') == 'all' else DEFAULT_SEARCH_FIELDS

        companies = filter_companies(state.records, query, facets, search_fields)
        logger.info(f"Query {query!r} with facets {facets} matched {len(companies)} of {len(state.records)} companies")

        return {
            'success': True,
            'state': state,
            'companies': companies,
            'count': len(companies),
            'total': len(state.records),
            'query': query,
            'filters': {param: parameters.get(param) or '' for param in FACET_FIELDS},
            'options': {
                param: facet_values(state.records, field_name)
                for param, field_name in FACET_FIELDS.items()
            },
        }

    def format_response(self, result: Dict[str, Any]) -> str:
        if not result.get('success'):
            return result.get('error', 'Unknown error')

        count = result.get('count', 0)
        return f"{count} {'company' if count == 1 else 'companies'} found"
