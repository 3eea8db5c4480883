"""Base action class."""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

from models.result import Failed, Loading, LoadResult


class BaseAction(ABC):
    """Base class for all page actions."""

    # Action name (should match the key in ACTION_REGISTRY)
    name: str = 'BASE'

    # Action description for the API index
    description: str = 'Base action - should not be used directly'

    # Jinja template rendered for HTML requests
    template: Optional[str] = None

    def __init__(self, services: Dict[str, Any]):
        """Initialize action with service dependencies.

        Args:
            services: Dict of service instances (source, ...)
        """
        self.services = services
        self.state: LoadResult = Loading()

    @abstractmethod
    def execute(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """Execute the action.

        Args:
            parameters: Action-specific parameters from the request

        Returns:
            Dict with 'success' bool, 'state' load result and page data
        """
        pass

    @abstractmethod
    def format_response(self, result: Dict[str, Any]) -> str:
        """Format the result as a short human-readable message.

        Args:
            result: The result dict from execute()

        Returns:
            Message used as page subtitle and in JSON responses
        """
        pass

    def validate_parameters(self, parameters: Dict[str, Any]) -> Optional[str]:
        """Validate that required parameters are present.

        Args:
            parameters: Parameters to validate

        Returns:
            Error message if validation fails, None if valid
        """
        return None  # Override in subclasses if needed

    def load_state(self):
        """Load records from the source service, or a Failed state if there is none."""
        source = self.services.get('source')
        if not source:
            self.state = Failed('Data source not available', status_code=503)
        else:
            self.state = source.load()
        return self.state

    @staticmethod
    def failure(state: Failed) -> Dict[str, Any]:
        return {'success': False, 'state': state, 'error': state.reason}
