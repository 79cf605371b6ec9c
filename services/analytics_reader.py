"""
Analytics Reader for AlertsDB
Assembles the precomputed analytics rows into one key -> value mapping
"""
import json
import logging
from typing import Any, Dict

from models import AnalyticsEntry

logger = logging.getLogger(__name__)


class AnalyticsDecodeError(Exception):
    """Raised when a stored analytics value is not valid JSON"""

    def __init__(self, key: str, error: Exception):
        super().__init__(f"Invalid JSON in analytics value for '{key}': {error}")
        self.key = key


class AnalyticsReader:
    """Read-only access to the analytics table"""

    def __init__(self, session):
        self.session = session

    def get_all(self) -> Dict[str, Any]:
        """
        Decode every analytics row

        Returns:
            Mapping of analytics key to its decoded value. A NULL value decodes to None.

        Raises:
            AnalyticsDecodeError: If any value fails to decode. No partial result is returned.
        """
        analytics = {}
        for entry in self.session.query(AnalyticsEntry).all():
            if entry.value is None:
                analytics[entry.key] = None
                continue
            try:
                analytics[entry.key] = json.loads(entry.value)
            except ValueError as e:
                raise AnalyticsDecodeError(entry.key, e) from e

        logger.debug(f"Loaded {len(analytics)} analytics entries")
        return analytics
