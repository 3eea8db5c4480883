"""Spreadsheet export parsing into company records."""
import csv
import io
import json
import logging
import math
from typing import Any, Dict, List

from core.errors import SourceParseError
from models.company import CompanyRecord

logger = logging.getLogger(__name__)


class RecordNormalizer:
    """Turns raw spreadsheet export text into an ordered list of records."""

    # '/*O_o*/\ngoogle.visualization.Query.setResponse(' ... ');'
    GVIZ_PREFIX_LENGTH = 47
    GVIZ_SUFFIX_LENGTH = 2

    FORMATS = ('gviz', 'csv')

    def parse(self, text: str, source_format: str = 'gviz') -> List[CompanyRecord]:
        """Parse text in the given export format."""
        if source_format == 'gviz':
            return self.parse_gviz(text)
        if source_format == 'csv':
            return self.parse_csv(text)
        raise ValueError(f"Unsupported source format: {source_format!r}")

    def parse_gviz(self, text: str) -> List[CompanyRecord]:
        """Parse a wrapped Google Visualization (JSON-table) response.

        Args:
            text: Raw response body including the JavaScript wrapper

        Returns:
            One record per table row, in row order

        Raises:
            SourceParseError: If the wrapper or JSON body is malformed
        """
        if len(text) < self.GVIZ_PREFIX_LENGTH + self.GVIZ_SUFFIX_LENGTH:
            raise SourceParseError("Response too short to be a JSON-table payload")

        body = text[self.GVIZ_PREFIX_LENGTH:-self.GVIZ_SUFFIX_LENGTH]
        try:
            payload = json.loads(body)
        except ValueError as e:
            raise SourceParseError(f"Invalid JSON-table payload: {e}") from e

        if not isinstance(payload, dict):
            raise SourceParseError("JSON-table payload is not an object")

        if payload.get('status') == 'error':
            messages = [err.get('detailed_message') or err.get('message', '')
                        for err in payload.get('errors', [])]
            raise SourceParseError(f"Spreadsheet query failed: {'; '.join(messages)}")

        table = payload.get('table')
        if not isinstance(table, dict):
            raise SourceParseError("JSON-table payload has no table")

        try:
            labels = [(col or {}).get('label', '') for col in table.get('cols', [])]
            records = []
            for row in table.get('rows', []):
                cells = (row or {}).get('c') or []
                records.append(self._gviz_row(labels, cells))
        except (AttributeError, TypeError) as e:
            raise SourceParseError(f"Malformed JSON-table rows: {e}") from e

        logger.info(f"Parsed {len(records)} records from JSON-table payload ({len(labels)} columns)")
        return records

    def _gviz_row(self, labels: List[str], cells: List[Any]) -> CompanyRecord:
        row: Dict[str, str] = {}
        for i, cell in enumerate(cells):
            if i >= len(labels) or not labels[i]:
                continue
            row[labels[i]] = self._cell_text(cell.get('v') if cell else None)
        return CompanyRecord(row)

    @staticmethod
    def _cell_text(value: Any) -> str:
        if value is None:
            return ''
        if isinstance(value, bool):
            return 'TRUE' if value else 'FALSE'
        if isinstance(value, float):
            if math.isfinite(value) and value.is_integer():
                return str(int(value))
            return repr(value)
        return str(value)

    def parse_csv(self, text: str) -> List[CompanyRecord]:
        """Parse a CSV export; the first row supplies the column names.

        Raises:
            SourceParseError: If the CSV is malformed
        """
        if text.startswith('\ufeff'):
            text = text[1:]

        reader = csv.DictReader(io.StringIO(text, newline=''), restval='', strict=True)
        try:
            records = [CompanyRecord.from_row(row) for row in reader]
        except csv.Error as e:
            raise SourceParseError(f"Invalid CSV payload: {e}") from e

        logger.info(f"Parsed {len(records)} records from CSV payload")
        return records
