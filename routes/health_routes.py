"""
Health Routes Blueprint
Liveness check with basic record counts
"""
from flask import Blueprint, current_app, jsonify
from datetime import datetime, timezone
import logging

from models import WeatherGovAlert, NasaFireAlert, AnalyticsEntry, db
from utils.response_utils import storage_error_message

logger = logging.getLogger(__name__)

health_bp = Blueprint('health', __name__)

@health_bp.route('/health')
def health():
    """API health check endpoint"""
    try:
        counts = {
            model.__tablename__: db.session.query(model).count()
            for model in (WeatherGovAlert, NasaFireAlert, AnalyticsEntry)
        }

        return jsonify({
            "status": "healthy",
            "service": current_app.config["SERVICE_NAME"],
            "version": current_app.config["VERSION"],
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": counts
        })
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return jsonify({
            "status": "error",
            "message": storage_error_message(e)
        }), 500
