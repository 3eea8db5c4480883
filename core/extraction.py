"""Extraction grammar for composite spreadsheet cells and display helpers.

Composite cells pack several values into one string, e.g.::

    Founder: Jane Doe, LinkedIn: https://www.linkedin.com/in/jane, Founder: John Roe, LinkedIn: Not Available
    LinkedIn: https://www.linkedin.com/company/acme/, Twitter: https://twitter.com/acme

Founder cells are read fragment by fragment (split on commas):

* ``Founder: <name>`` (also ``Co-Founder:``) starts a new founder entry.
* ``LinkedIn: <value>`` sets the LinkedIn URL of the latest entry if that entry
  has not taken a LinkedIn fragment yet, otherwise it starts an unnamed entry. ``Not Available`` means no link.

Social cells are searched as a whole for ``LinkedIn: <url>`` and
``Twitter: <url>``, where a url is ``http(s)://`` up to the next space or comma.
Labels are matched case-insensitively. URLs are never validated.
"""
import math
import re
from typing import Any, List, NamedTuple, Optional

from models.founder import Founder, SocialLinks

NOT_AVAILABLE = 'N/A'
NO_LINKEDIN = 'No LinkedIn profile available'

FOUNDER_RE = re.compile(
    r'(?:co-?)?founder\s*:\s*(?P<name>.*?)\s*(?=linkedin\s*:|$)',
    re.IGNORECASE,
)
LINKEDIN_FIELD_RE = re.compile(r'linkedin\s*:\s*(?P<value>.*?)\s*$', re.IGNORECASE)
LINKEDIN_SOCIAL_RE = re.compile(r'linkedin\s*:\s*(?P<url>https?://[^\s,]+)', re.IGNORECASE)
TWITTER_SOCIAL_RE = re.compile(r'twitter\s*:\s*(?P<url>https?://[^\s,]+)', re.IGNORECASE)
LINKEDIN_URL_RE = re.compile(r'https?://(?:[\w-]+\.)?linkedin\.com/[^\s,]+', re.IGNORECASE)
SCHEME_RE = re.compile(r'^https?://(www\.)?', re.IGNORECASE)

_NO_VALUE_TEXT = {'', 'not available', 'n/a', 'none'}


class TextSegment(NamedTuple):
    """A run of cell text; ``url`` is set when the run is a LinkedIn link."""
    text: str
    url: Optional[str] = None


def _link_or_none(value: str) -> Optional[str]:
    value = value.strip()
    if value.lower() in _NO_VALUE_TEXT:
        return None
    return value


def parse_founders(cell: Optional[str]) -> List[Founder]:
    """Extract founder entries from a 'Founders & LinkedIn URLs' cell."""
    if not cell:
        return []

    founders: List[Founder] = []
    # set once the latest entry has taken a LinkedIn fragment, even "Not Available"
    linked = False
    for fragment in cell.split(','):
        founder_match = FOUNDER_RE.search(fragment)
        linkedin_match = LINKEDIN_FIELD_RE.search(fragment)

        if founder_match:
            founders.append(Founder(name=founder_match.group('name') or None))
            linked = False

        if linkedin_match:
            link = _link_or_none(linkedin_match.group('value'))
            if founders and not linked:
                founders[-1] = Founder(name=founders[-1].name, linkedin=link)
            else:
                founders.append(Founder(name=None, linkedin=link))
            linked = True

    return founders


def parse_social_links(cell: Optional[str]) -> SocialLinks:
    """Extract LinkedIn and Twitter URLs from a 'Social Media Links' cell."""
    if not cell:
        return SocialLinks()

    linkedin = LINKEDIN_SOCIAL_RE.search(cell)
    twitter = TWITTER_SOCIAL_RE.search(cell)
    return SocialLinks(
        linkedin=linkedin.group('url') if linkedin else None,
        twitter=twitter.group('url') if twitter else None,
    )


def linkedin_segments(text: Optional[str]) -> List[TextSegment]:
    """Split free text into plain runs and LinkedIn URL runs."""
    if not text:
        return []

    segments: List[TextSegment] = []
    position = 0
    for match in LINKEDIN_URL_RE.finditer(text):
        if match.start() > position:
            segments.append(TextSegment(text[position:match.start()]))
        segments.append(TextSegment(match.group(0), url=match.group(0)))
        position = match.end()
    if position < len(text):
        segments.append(TextSegment(text[position:]))
    return segments


def format_currency(value: Any) -> str:
    """Format a valuation cell for display; never returns 'NaN'."""
    if value is None:
        return NOT_AVAILABLE

    text = str(value).strip()
    if text.lower() in _NO_VALUE_TEXT:
        return NOT_AVAILABLE
    if '$' in text:
        return text

    try:
        amount = float(text.replace(',', ''))
    except ValueError:
        # "12M" reads as an amount; "Undisclosed" is shown as written
        return f"${text}" if text[0].isdigit() else text

    if not math.isfinite(amount):
        return NOT_AVAILABLE
    sign = '-' if amount < 0 else ''
    amount = abs(amount)
    if amount.is_integer():
        return f"{sign}${int(amount):,}"
    return f"{sign}${amount:,.2f}"


def display_domain(url: Optional[str]) -> str:
    """Strip the scheme and 'www.' from a website URL."""
    if not url:
        return NOT_AVAILABLE
    return SCHEME_RE.sub('', url.strip()) or NOT_AVAILABLE


def display_value(value: Optional[str], fallback: str = NOT_AVAILABLE) -> str:
    if value is None or not str(value).strip():
        return fallback
    return str(value)
