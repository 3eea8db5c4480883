"""Small-cap company directory web application."""
import logging
import sys
from typing import Any, Dict

from dotenv import load_dotenv
load_dotenv()

from flask import Flask, request, jsonify, render_template
from config import config
from services import ServiceFactory
from actions import ACTION_REGISTRY, get_action_descriptions
from models import CompanyRecord
from core.extraction import display_domain, display_value, format_currency

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.add_template_filter(format_currency, 'currency')
app.add_template_filter(display_domain, 'domain')
app.add_template_filter(display_value, 'display_value')


def run_action(action_name: str, parameters: Dict[str, Any]) -> tuple:
    """Execute a page action with fresh services.

    Returns:
        Tuple of (action, result dict)
    """
    services = ServiceFactory.create().create_all()
    action = ACTION_REGISTRY[action_name](services)
    try:
        return action, action.execute(parameters)
    finally:
        source = services.get('source')
        if source:
            source.close()


def company_json(company: CompanyRecord) -> Dict[str, Any]:
    return {**company.to_dict(), 'slug': company.slug}


def render_error(message: str, status_code: int):
    return render_template('error.html', message=message, status_code=status_code), status_code


@app.context_processor
def inject_settings():
    return {'trade_url': config.trade_url}


@app.route('/', methods=['GET'])
def landing():
    """Marketing landing page."""
    action = ACTION_REGISTRY['LANDING']({})
    result = action.execute({})
    return render_template(action.template, headline=action.format_response(result), **result)


@app.route('/companies', methods=['GET'])
def company_list():
    """Searchable, filterable company directory."""
    logger.info(f"Received GET /companies request: {request.args.to_dict()}")

    try:
        action, result = run_action('LIST_COMPANIES', request.args.to_dict())
    except Exception as e:
        logger.error(f"Error in /companies endpoint: {e}", exc_info=True)
        return render_error('Something went wrong', 500)

    if not result['success']:
        return render_error(result['error'], result['state'].status_code)

    return render_template(action.template, summary=action.format_response(result), **result)


@app.route('/companies/<path:company_name>', methods=['GET'])
def company_detail(company_name):
    """Company detail page; the path segment is the URL-encoded company name."""
    logger.info(f"Received GET /companies/{company_name} request")

    try:
        action, result = run_action('COMPANY_DETAIL', {'name': company_name})
    except Exception as e:
        logger.error(f"Error in /companies/<name> endpoint: {e}", exc_info=True)
        return render_error('Something went wrong', 500)

    if not result['success']:
        return render_error(result['error'], result['state'].status_code)

    return render_template(action.template, title=action.format_response(result), **result)


@app.route('/api/companies', methods=['GET'])
def api_company_list():
    """JSON variant of the company directory."""
    try:
        action, result = run_action('LIST_COMPANIES', request.args.to_dict())
    except Exception as e:
        logger.error(f"Error in /api/companies endpoint: {e}", exc_info=True)
        return jsonify({'status': 'error', 'message': str(e)}), 500

    if not result['success']:
        return jsonify({
            'status': 'error',
            'message': result['error']
        }), result['state'].status_code

    return jsonify({
        'status': 'success',
        'message': action.format_response(result),
        'count': result['count'],
        'total': result['total'],
        'filters': result['filters'],
        'options': result['options'],
        'companies': [company_json(c) for c in result['companies']],
    }), 200


@app.route('/api/companies/<path:company_name>', methods=['GET'])
def api_company_detail(company_name):
    """JSON variant of the company detail page."""
    try:
        action, result = run_action('COMPANY_DETAIL', {'name': company_name})
    except Exception as e:
        logger.error(f"Error in /api/companies/<name> endpoint: {e}", exc_info=True)
        return jsonify({'status': 'error', 'message': str(e)}), 500

    if not result['success']:
        return jsonify({
            'status': 'error',
            'message': result['error']
        }), result['state'].status_code

    return jsonify({
        'status': 'success',
        'company': company_json(result['company']),
        'founders': [f.to_dict() for f in result['founders']],
        'social': result['social'].to_dict(),
        'sections': [
            {'title': s.title, 'fields': dict(s.rows)}
            for s in result['sections'] if s.rows
        ],
    }), 200


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    result = ACTION_REGISTRY['HEALTH_CHECK']({}).execute({})
    return jsonify({'status': result['status']}), 200


@app.route('/api', methods=['GET'])
def api_index():
    """API index."""
    return jsonify({
        'service': 'smallcap-directory',
        'version': '1.0',
        'source_format': config.sheet_format,
        'actions': get_action_descriptions(),
        'endpoints': {
            '/': 'GET - Landing page',
            '/companies': 'GET - Company directory (params: q, exchange, sector, industry, scope)',
            '/companies/<name>': 'GET - Company detail page',
            '/api/companies': 'GET - Company directory as JSON',
            '/api/companies/<name>': 'GET - Company detail as JSON',
            '/health': 'GET - Health check'
        }
    }), 200


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=config.port, debug=False)
