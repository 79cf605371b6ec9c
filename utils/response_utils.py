"""
Response utility functions for standardized API responses
"""
from flask import jsonify, make_response
from functools import wraps
from sqlalchemy.exc import SQLAlchemyError
import logging

from services.alert_store import AlertNotFound

logger = logging.getLogger(__name__)

def text_response(body="", status=200):
    """Plain-text response, used for error bodies and empty acknowledgements"""
    response = make_response(body, status)
    response.mimetype = "text/plain"
    return response

def paginated_response(page):
    """Paginated alert list as {data, total}"""
    return jsonify(page.to_dict())

def storage_error_message(error):
    """Driver message for a database error, without SQLAlchemy's statement dump"""
    original = getattr(error, 'orig', None)
    return str(original if original is not None else error)

def handle_errors(f):
    """Decorator mapping store exceptions onto HTTP responses"""
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except AlertNotFound as e:
            logger.info(str(e))
            return text_response("Not Found", 404)
        except SQLAlchemyError as e:
            logger.exception(f"Database error in {f.__name__}: {e}")
            return text_response(storage_error_message(e), 500)
        except Exception as e:
            logger.exception(f"Error in {f.__name__}: {str(e)}")
            return text_response(str(e), 500)
    return wrapper
