"""
Alert Routes Blueprint
Paginated listing, create, update and bulk clear for weather and fire alerts
"""
from flask import Blueprint, current_app, jsonify
import logging

from utils.request_utils import json_body, parse_pagination
from utils.response_utils import handle_errors, paginated_response, text_response

logger = logging.getLogger(__name__)

alert_bp = Blueprint('alerts', __name__)

# Matches only the registered collections, anything else falls through to not_found
COLLECTION = '<any(weatherGovAlerts, nasaFireAlerts):collection>'


def _store():
    return current_app.extensions['alert_store']


@alert_bp.route(f'/{COLLECTION}', methods=['GET'])
@handle_errors
def list_alerts(collection):
    """Get alerts newest first with limit/offset pagination"""
    limit, offset = parse_pagination()
    page = _store().list_page(collection, limit, offset)
    return paginated_response(page)


@alert_bp.route(f'/{COLLECTION}', methods=['POST'])
@handle_errors
def create_alert(collection):
    """Add a new alert"""
    alert_id = _store().create(collection, json_body())
    return jsonify({'id': alert_id}), 201


@alert_bp.route(f'/{COLLECTION}/<int:alert_id>', methods=['PUT'])
@handle_errors
def update_alert(collection, alert_id):
    """Overwrite an existing alert, 404 when the id is unknown"""
    updated_id = _store().update(collection, alert_id, json_body())
    return jsonify({'updatedID': updated_id}), 200


@alert_bp.route('/clear', methods=['POST'])
@handle_errors
def clear_database():
    """Delete every alert and analytics row"""
    _store().clear_all()
    logger.warning("Database cleared via /clear")
    return text_response("", 200)


@alert_bp.app_errorhandler(404)
def not_found(error):
    """Routing misses (unknown path, non-integer id) answer like a missing record"""
    return text_response("Not Found", 404)
