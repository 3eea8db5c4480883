"""Company detail action."""
import logging
from typing import Dict, Any, Optional

from actions.base import BaseAction
from core.errors import CompanyNotFoundError
from core.extraction import linkedin_segments, parse_founders, parse_social_links
from core.routing import find_company
from core.sections import build_sections
from models.result import Failed

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = 'Company not found'


class CompanyDetailAction(BaseAction):
    """Show everything known about a single company."""

    name = 'COMPANY_DETAIL'
    description = 'Show one company by its exact (URL-decoded) company name'
    template = 'company.html'

    def validate_parameters(self, parameters: Dict[str, Any]) -> Optional[str]:
        if not (parameters.get('name') or '').strip():
            return 'Missing company name'
        return None

    def execute(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        error = self.validate_parameters(parameters)
        if error:
            return self.failure(Failed(error, status_code=400))

        state = self.load_state()
        if not state.is_ready:
            return self.failure(state)

        try:
            company = find_company(state.records, parameters['name'])
        except CompanyNotFoundError:
            logger.warning(f"Company lookup failed for {parameters['name']!r} ({len(state.records)} companies loaded)")
            return self.failure(Failed(NOT_FOUND_MESSAGE, status_code=404))

        return {
            'success': True,
            'state': state,
            'company': company,
            'founders': parse_founders(company.get('Founders & LinkedIn URLs')),
            'contacts': linkedin_segments(company.get('Key Contacts')),
            'social': parse_social_links(company.get('Social Media Links')),
            'sections': build_sections(company),
        }

    def format_response(self, result: Dict[str, Any]) -> str:
        if not result.get('success'):
            return result.get('error', 'Unknown error')

        company = result['company']
        industry = company.get('Industry')
        return f"{company.name} ({industry})" if industry else company.name
