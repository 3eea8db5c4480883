"""Services package."""
from services.factory import ServiceFactory
from services.sheet_source import SheetSourceService, FETCH_FAILED_MESSAGE

__all__ = [
    'ServiceFactory',
    'SheetSourceService',
    'FETCH_FAILED_MESSAGE',
]
