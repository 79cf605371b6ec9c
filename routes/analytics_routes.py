"""
Analytics Routes Blueprint
Read-only access to the precomputed analytics mapping
"""
from flask import Blueprint, current_app, jsonify
import logging

from utils.response_utils import handle_errors

logger = logging.getLogger(__name__)

analytics_bp = Blueprint('analytics', __name__)

@analytics_bp.route('/analytics', methods=['GET'])
@handle_errors
def get_analytics():
    """Get all analytics entries as one flat key -> value mapping"""
    analytics = current_app.extensions['analytics_reader'].get_all()
    return jsonify(analytics)
