"""Page action handlers."""
from typing import Dict

from actions.base import BaseAction
from actions.landing import LandingAction
from actions.list_companies import ListCompaniesAction
from actions.company_detail import CompanyDetailAction
from actions.health_check import HealthCheckAction

__all__ = [
    'BaseAction',
    'LandingAction',
    'ListCompaniesAction',
    'CompanyDetailAction',
    'HealthCheckAction',
    'ACTION_REGISTRY',
    'get_action_descriptions',
]

# Action registry for easy lookup - single source of truth
ACTION_REGISTRY = {
    'LANDING': LandingAction,
    'LIST_COMPANIES': ListCompaniesAction,
    'COMPANY_DETAIL': CompanyDetailAction,
    'HEALTH_CHECK': HealthCheckAction,
}


def get_action_descriptions() -> Dict[str, Dict[str, str]]:
    """Get action descriptions for the API index.

    Returns:
        Dict mapping action name to dict with 'description' key
    """
    return {
        name: {'description': cls.description}
        for name, cls in ACTION_REGISTRY.items()
    }
