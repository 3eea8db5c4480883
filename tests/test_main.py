"""Tests for main.py Flask endpoints."""
import pytest
from unittest.mock import patch

from models import Failed


@pytest.fixture
def client():
    """Create Flask test client."""
    from main import app
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def patch_factory(mock_services):
    """Patch ServiceFactory so routes use the mock source service."""
    with patch('main.ServiceFactory') as mock_factory:
        mock_factory.create.return_value.create_all.return_value = mock_services
        yield mock_factory


class TestPages:
    """Tests for the HTML pages."""

    def test_landing(self, client):
        response = client.get('/')

        assert response.status_code == 200
        body = response.get_data(as_text=True)
        assert 'Small Cap Gems' in body
        assert 'https://trade.smallcap.ai' in body

    def test_company_list(self, client, patch_factory):
        response = client.get('/companies')

        assert response.status_code == 200
        body = response.get_data(as_text=True)
        assert 'Acme Robotics' in body
        assert '3 companies found' in body
        assert '/companies/Bolt%20%26%20Bearing%20Co' in body
        assert '$45,000,000' in body
        assert 'acme.com' in body

    def test_company_list_search(self, client, patch_factory):
        response = client.get('/companies?q=robot&exchange=NASDAQ')

        body = response.get_data(as_text=True)
        assert 'Acme Robotics' in body
        assert 'Bolt &amp; Bearing Co' not in body
        assert '<option value="NASDAQ" selected>' in body

    def test_company_list_no_results(self, client, patch_factory):
        response = client.get('/companies?q=zzz')

        assert response.status_code == 200
        assert 'No companies found' in response.get_data(as_text=True)

    def test_company_list_fetch_failure(self, client, patch_factory, mock_services):
        mock_services['source'].load.return_value = Failed('Failed to fetch data')

        response = client.get('/companies')

        assert response.status_code == 502
        body = response.get_data(as_text=True)
        assert 'Failed to fetch data' in body
        assert 'Return to Directory' in body

    def test_company_detail_decodes_name(self, client, patch_factory):
        response = client.get('/companies/Bolt%20%26%20Bearing%20Co')

        assert response.status_code == 200
        assert 'Bolt &amp; Bearing Co' in response.get_data(as_text=True)

    def test_company_detail_people_and_links(self, client, patch_factory):
        response = client.get('/companies/Acme%20Robotics')

        body = response.get_data(as_text=True)
        assert 'Jane Doe' in body
        assert 'https://www.linkedin.com/in/janedoe' in body
        assert 'No LinkedIn profile available' in body
        assert 'https://twitter.com/acme' in body
        assert 'Warehouse automation robots.' in body

    def test_company_detail_not_found(self, client, patch_factory):
        response = client.get('/companies/Nope%20Inc')

        assert response.status_code == 404
        body = response.get_data(as_text=True)
        assert 'Company not found' in body
        assert "find the company you" in body

    def test_unexpected_error_is_500(self, client, patch_factory, mock_services):
        mock_services['source'].load.side_effect = RuntimeError('boom')

        response = client.get('/companies')

        assert response.status_code == 500


class TestApi:
    """Tests for the JSON endpoints."""

    def test_api_company_list(self, client, patch_factory):
        response = client.get('/api/companies?sector=Industrials')

        assert response.status_code == 200
        data = response.get_json()
        assert data['status'] == 'success'
        assert data['count'] == 1
        assert data['total'] == 3
        assert data['companies'][0]['Company Name'] == 'Bolt & Bearing Co'
        assert data['companies'][0]['slug'] == 'Bolt%20%26%20Bearing%20Co'

    def test_api_company_detail_percent_in_name(self, client, patch_factory):
        response = client.get('/api/companies/100%25%20Organic%20Farms')

        assert response.status_code == 200
        data = response.get_json()
        assert data['company']['Company Name'] == '100% Organic Farms'
        assert data['social'] == {'linkedin': None, 'twitter': None}

    def test_api_company_detail_founders(self, client, patch_factory):
        data = client.get('/api/companies/Acme%20Robotics').get_json()

        assert data['founders'] == [
            {'name': 'Jane Doe', 'linkedin': 'https://www.linkedin.com/in/janedoe'},
            {'name': 'John Roe', 'linkedin': None},
        ]
        titles = [s['title'] for s in data['sections']]
        assert 'Financial Information' in titles

    def test_api_not_found(self, client, patch_factory):
        response = client.get('/api/companies/Nope')

        assert response.status_code == 404
        assert response.get_json() == {'status': 'error', 'message': 'Company not found'}

    def test_api_fetch_failure(self, client, patch_factory, mock_services):
        mock_services['source'].load.return_value = Failed('Failed to fetch data')

        response = client.get('/api/companies')

        assert response.status_code == 502
        assert response.get_json()['message'] == 'Failed to fetch data'

    def test_source_closed_after_request(self, client, patch_factory, mock_services):
        client.get('/api/companies')

        mock_services['source'].close.assert_called_once()

    def test_health(self, client):
        response = client.get('/health')

        assert response.status_code == 200
        assert response.get_json() == {'status': 'healthy'}

    def test_api_index(self, client):
        data = client.get('/api').get_json()

        assert data['service'] == 'smallcap-directory'
        assert 'COMPANY_DETAIL' in data['actions']
