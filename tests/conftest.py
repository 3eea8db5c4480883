"""Pytest fixtures and mock data for testing."""
import json
import os

import pytest
from unittest.mock import Mock

# Set test environment variables before importing config
os.environ['SHEET_ID'] = 'test-sheet-id'
os.environ['SHEET_TAB_ID'] = '123'
os.environ['SHEET_FORMAT'] = 'gviz'
os.environ['REQUEST_TIMEOUT'] = '5'

from models import CompanyRecord, Ready  # noqa: E402

GVIZ_PREFIX = '/*O_o*/\ngoogle.visualization.Query.setResponse('
GVIZ_SUFFIX = ');'

FOUNDERS_CELL = (
    'Founder: Jane Doe, LinkedIn: https://www.linkedin.com/in/janedoe, '
    'Founder: John Roe, LinkedIn: Not Available'
)
SOCIAL_CELL = 'LinkedIn: https://www.linkedin.com/company/acme/, Twitter: https://twitter.com/acme'


# ============ MOCK DATA FIXTURES ============

@pytest.fixture
def make_gviz():
    """Build a wrapped JSON-table response from labels and row values."""
    def _make(labels, rows, **extra):
        table = {
            'cols': [{'id': chr(65 + i), 'label': label, 'type': 'string'}
                     for i, label in enumerate(labels)],
            'rows': [
                {'c': [None if value is None else {'v': value} for value in row]}
                for row in rows
            ],
        }
        payload = {'version': '0.6', 'reqId': '0', 'status': 'ok', 'table': table}
        payload.update(extra)
        return GVIZ_PREFIX + json.dumps(payload) + GVIZ_SUFFIX
    return _make


@pytest.fixture
def gviz_text(make_gviz):
    """JSON-table response with three companies."""
    return make_gviz(
        ['Company Name', 'Industry', 'Headquarters', 'Exchange', 'Company Valuation'],
        [
            ['Acme Robotics', 'Robotics', 'Austin, TX', 'NASDAQ', 45000000],
            ['Bolt & Bearing Co', 'Manufacturing', None, 'NYSE', None],
            ['100% Organic Farms', 'Agriculture', 'Fresno, CA', 'NASDAQ', '$12M'],
        ],
    )


@pytest.fixture
def csv_text():
    """CSV export with a header row and two companies."""
    return (
        'Company Name,Industry,Headquarters,Exchange\r\n'
        'Acme Robotics,Robotics,"Austin, TX",NASDAQ\r\n'
        'Bolt & Bearing Co,Manufacturing,"Detroit, MI",NYSE\r\n'
    )


@pytest.fixture
def mock_records():
    """Normalized company records."""
    return [
        CompanyRecord({
            'Company Name': 'Acme Robotics',
            'Industry': 'Robotics',
            'Headquarters': 'Austin, TX',
            'Exchange': 'NASDAQ',
            'Sector': 'Technology',
            'Company Valuation': '45000000',
            'Website URL': 'https://www.acme.com',
            'Company Description': 'Warehouse automation robots.',
            'Founders & LinkedIn URLs': FOUNDERS_CELL,
            'Key Contacts': 'CFO Ann Lee https://www.linkedin.com/in/annlee',
            'Social Media Links': SOCIAL_CELL,
        }),
        CompanyRecord({
            'Company Name': 'Bolt & Bearing Co',
            'Industry': 'Manufacturing',
            'Headquarters': 'Detroit, MI',
            'Exchange': 'NYSE',
            'Sector': 'Industrials',
            'Company Valuation': '',
            'Website URL': 'http://boltbearing.com',
        }),
        CompanyRecord({
            'Company Name': '100% Organic Farms',
            'Industry': 'Agriculture',
            'Headquarters': 'Fresno, CA',
            'Exchange': 'NASDAQ',
            'Sector': 'Consumer Staples',
            'Company Valuation': '$12M',
            'Company Description': 'Robotic harvesting for organic growers.',
        }),
    ]


@pytest.fixture
def mock_source_service(mock_records):
    """Mock SheetSourceService returning the mock records."""
    mock = Mock()
    mock.load.return_value = Ready(mock_records)
    mock.load_records.return_value = mock_records
    return mock


@pytest.fixture
def mock_services(mock_source_service):
    """Combined mock services dictionary."""
    return {'source': mock_source_service}
