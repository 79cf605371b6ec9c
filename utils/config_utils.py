"""
Configuration utilities and constants
"""

class PaginationConfig:
    """Centralized pagination configuration"""
    DEFAULT_LIMIT = 10
    DEFAULT_OFFSET = 0
