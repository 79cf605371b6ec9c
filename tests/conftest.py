import json

import pytest

from app import create_app
from config import TestConfig
from models import AnalyticsEntry, db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    with app.app_context():
        yield app.extensions['alert_store']


@pytest.fixture
def seed_analytics(app):
    """Insert analytics rows; values are JSON encoded unless already a string"""
    def _seed(entries):
        with app.app_context():
            for key, value in entries.items():
                raw = value if isinstance(value, str) or value is None else json.dumps(value)
                db.session.add(AnalyticsEntry(key=key, value=raw))
            db.session.commit()
    return _seed


def weather_alert(**overrides):
    alert = {
        "tweet_id": "1",
        "tweet_text": "storm warning",
        "created_at": "2024-01-01T00:00:00Z",
        "author_id": "42",
        "author_name": "NWS",
        "event_details": "Severe thunderstorm",
        "tags": ["storm", "warning"],
        "tweet_url": "https://x.com/NWS/status/1",
        "media_urls": None,
        "conversational_message": "Stay indoors.",
    }
    alert.update(overrides)
    return alert


def fire_alert(**overrides):
    alert = {
        "title": "Wildfire near Paradise",
        "description": "Fast moving brush fire",
        "category": "Wildfires",
        "latitude": 39.76,
        "longitude": -121.62,
        "date": "2024-07-01T12:00:00Z",
        "conversational_message": "Evacuation orders in effect.",
        "tags": ["fire"],
    }
    alert.update(overrides)
    return alert
