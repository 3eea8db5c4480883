"""Published spreadsheet export service."""
import logging
from typing import List, Optional

import requests

from config import config
from core.errors import DirectoryError, SourceFetchError
from core.normalizer import RecordNormalizer
from models.company import CompanyRecord
from models.result import Failed, LoadResult, Ready

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = 'Failed to fetch data'


class SheetSourceService:
    """Fetches the company spreadsheet and normalizes it into records."""

    EXPORT_URLS = {
        'gviz': 'https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:json&gid={tab_id}',
        'csv': 'https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv&gid={tab_id}',
    }

    HEADERS = {
        'User-Agent': 'smallcap-directory/1.0',
        'Accept': 'application/json,text/csv,text/plain;q=0.9,*/*;q=0.8',
    }

    def __init__(self, sheet_id: Optional[str] = None, tab_id: Optional[str] = None,
                 source_format: Optional[str] = None, timeout: Optional[float] = None,
                 normalizer: Optional[RecordNormalizer] = None):
        self.sheet_id = sheet_id or config.sheet_id
        self.tab_id = tab_id or config.sheet_tab_id
        self.source_format = source_format or config.sheet_format
        self.timeout = timeout or config.request_timeout
        self.normalizer = normalizer or RecordNormalizer()

        if self.source_format not in self.EXPORT_URLS:
            raise ValueError(f"Unsupported source format: {self.source_format!r}")

        self.session = requests.Session()
        self.session.headers.update(self.HEADERS)

    @property
    def url(self) -> str:
        """Export endpoint for the configured sheet, tab and format."""
        return self.EXPORT_URLS[self.source_format].format(
            sheet_id=self.sheet_id, tab_id=self.tab_id
        )

    def fetch_text(self) -> str:
        """Issue the single GET request and return the raw body.

        Raises:
            SourceFetchError: On network errors or non-2xx responses
        """
        logger.info(f"Fetching {self.source_format} export for sheet {self.sheet_id} (gid {self.tab_id})")
        try:
            resp = self.session.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise SourceFetchError(f"Could not fetch spreadsheet export: {e}") from e

        # requests falls back to ISO-8859-1 for text/* without a charset
        if 'charset' not in resp.headers.get('Content-Type', '').lower():
            resp.encoding = 'utf-8'
        return resp.text

    def load_records(self) -> List[CompanyRecord]:
        """Fetch and normalize all records.

        Raises:
            SourceFetchError: If the request fails
            SourceParseError: If the body cannot be parsed
        """
        text = self.fetch_text()
        records = self.normalizer.parse(text, self.source_format)
        logger.info(f"Loaded {len(records)} companies")
        return records

    def load(self) -> LoadResult:
        """Fetch and normalize, folding any failure into a Failed result."""
        try:
            return Ready(self.load_records())
        except DirectoryError as e:
            logger.error(f"Error loading companies: {e}", exc_info=True)
            return Failed(FETCH_FAILED_MESSAGE, status_code=502)

    def close(self):
        self.session.close()
