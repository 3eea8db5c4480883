"""Company detail URL encoding and name lookup."""
import logging
from typing import Iterable
from urllib.parse import quote, unquote

from core.errors import CompanyNotFoundError
from models.company import CompanyRecord

logger = logging.getLogger(__name__)

# Characters left unescaped by JavaScript's encodeURIComponent
_UNRESERVED = "-_.!~*'()"


def encode_company_name(name: str) -> str:
    """Percent-encode a company name for use as a single path segment."""
    return quote(name or '', safe=_UNRESERVED)


def decode_company_name(segment: str) -> str:
    """Inverse of encode_company_name."""
    return unquote(segment or '')


def find_company(records: Iterable[CompanyRecord], name: str) -> CompanyRecord:
    """Find the first record whose 'Company Name' equals name exactly.

    Raises:
        CompanyNotFoundError: If no record matches
    """
    for record in records:
        if record.name == name:
            return record
    logger.info(f"No company named {name!r}")
    raise CompanyNotFoundError(name)


def find_company_by_slug(records: Iterable[CompanyRecord], segment: str) -> CompanyRecord:
    """Decode an encoded path segment and look the company up by name."""
    return find_company(records, decode_company_name(segment))
