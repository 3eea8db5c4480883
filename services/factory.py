"""Service construction for request handlers."""
from typing import Any, Dict, Optional

from config import config


class ServiceFactory:
    """Creates the services a page action needs."""

    def __init__(self, source_format: Optional[str] = None):
        self._source_format = source_format or config.sheet_format

    @classmethod
    def create(cls, source_format: Optional[str] = None) -> 'ServiceFactory':
        return cls(source_format=source_format)

    def create_all(self) -> Dict[str, Any]:
        """Create all services as a dict.

        Returns:
            Dict of service name to service instance
        """
        from services.sheet_source import SheetSourceService

        return {
            'source': SheetSourceService(source_format=self._source_format),
        }
