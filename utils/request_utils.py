"""
Request parsing helpers shared by the route blueprints
"""
import re

from flask import request

from utils.config_utils import PaginationConfig

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_int(value):
    """
    Read the leading integer of a query string value, e.g. "25" -> 25, "5abc" -> 5.
    Returns None when the value does not start with a number.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def parse_pagination(args=None):
    """
    Get (limit, offset) from the query string.

    limit falls back to the default when absent, non-numeric or not positive;
    offset falls back to 0 when absent, non-numeric or negative.
    """
    if args is None:
        args = request.args

    limit = parse_int(args.get('limit'))
    if not limit or limit < 0:
        limit = PaginationConfig.DEFAULT_LIMIT

    offset = parse_int(args.get('offset'))
    if not offset or offset < 0:
        offset = PaginationConfig.DEFAULT_OFFSET

    return limit, offset


def json_body():
    """Request JSON object, or an empty dict for a missing or non-object body"""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
