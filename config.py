import os

class Config:
    """Configuration settings for the AlertsDB service"""

    # Server Configuration
    PORT = int(os.environ.get("PORT", "3337"))
    HOST = os.environ.get("HOST", "0.0.0.0")
    TESTING = False

    # Database Configuration - single local SQLite file by default
    DATABASE_URL = os.environ.get(
        "DATABASE_URL", f"sqlite:///{os.path.abspath('alerts_data.db')}"
    )

    # CORS Configuration
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Logging Configuration
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Service metadata reported by /health
    SERVICE_NAME = "AlertsDB API"
    VERSION = "1.0.0"

    @classmethod
    def validate(cls):
        """Validate configuration settings"""
        if not cls.DATABASE_URL:
            raise ValueError("DATABASE_URL environment variable is required")

        if not 0 < cls.PORT < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {cls.PORT}")

        return True


class TestConfig(Config):
    """In-memory database for the test suite"""
    TESTING = True
    DATABASE_URL = "sqlite:///:memory:"
    LOG_LEVEL = "WARNING"
