from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import Column, Integer, Float, String, Text


class Base(DeclarativeBase):
    pass


db = SQLAlchemy(model_class=Base)


class WeatherGovAlert(db.Model):
    """
    Weather alert posted by weather.gov, stored together with the
    conversational summary generated for it
    """
    __tablename__ = "weatherGovAlerts"

    # Fields a client may set on create/update, in column order
    FIELDS = (
        'tweet_id', 'tweet_text', 'created_at', 'author_id', 'author_name',
        'event_details', 'tags', 'tweet_url', 'media_urls', 'conversational_message',
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    tweet_id = Column(String)
    tweet_text = Column(Text)
    created_at = Column(String, index=True)   # ISO timestamp, sort key
    author_id = Column(String)
    author_name = Column(String)
    event_details = Column(Text)
    tags = Column(Text)                       # Comma-joined tag list
    tweet_url = Column(String)
    media_urls = Column(Text)
    conversational_message = Column(Text)

    def __repr__(self):
        return f'<WeatherGovAlert {self.id}: {self.tweet_id}>'

    def to_dict(self):
        """Convert alert to dictionary for JSON serialization"""
        return {
            'id': self.id,
            'tweet_id': self.tweet_id,
            'tweet_text': self.tweet_text,
            'created_at': self.created_at,
            'author_id': self.author_id,
            'author_name': self.author_name,
            'event_details': self.event_details,
            'tags': self.tags,
            'tweet_url': self.tweet_url,
            'media_urls': self.media_urls,
            'conversational_message': self.conversational_message,
        }


class NasaFireAlert(db.Model):
    """
    Wildfire event reported by NASA EONET
    """
    __tablename__ = "nasaFireAlerts"

    FIELDS = (
        'title', 'description', 'category', 'latitude', 'longitude',
        'date', 'conversational_message', 'tags',
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String)
    description = Column(Text)
    category = Column(String)
    latitude = Column(Float)
    longitude = Column(Float)
    date = Column(String, index=True)         # ISO timestamp, sort key
    conversational_message = Column(Text)
    tags = Column(Text)

    def __repr__(self):
        return f'<NasaFireAlert {self.id}: {self.title}>'

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'category': self.category,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'date': self.date,
            'conversational_message': self.conversational_message,
            'tags': self.tags,
        }


class AnalyticsEntry(db.Model):
    """
    Precomputed analytics summary, one JSON encoded value per key.
    Written by the analytics job, read-only through the API.
    """
    __tablename__ = "analytics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String, unique=True, nullable=False)
    value = Column(Text)                      # JSON encoded payload

    def __repr__(self):
        return f'<AnalyticsEntry {self.key}>'
