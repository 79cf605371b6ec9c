import logging
from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from config import Config
from models import db
from services.alert_store import AlertStore
from services.analytics_reader import AnalyticsReader

logger = logging.getLogger(__name__)


def create_app(config_class=Config, alert_store=None, analytics_reader=None):
    """
    Build the Flask application

    The store objects are constructed here (or passed in) and attached to
    app.extensions; the blueprints only ever reach them through the app.
    """
    logging.basicConfig(level=config_class.LOG_LEVEL)

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=1, x_host=1)

    CORS(app, origins=config_class.CORS_ORIGINS, send_wildcard=True)

    # Configure the database
    app.config["SQLALCHEMY_DATABASE_URI"] = config_class.DATABASE_URL
    logger.info(f"Connecting to database: {config_class.DATABASE_URL[:50]}...")
    db.init_app(app)

    # Schema bootstrap, no migrations
    with app.app_context():
        db.create_all()
        logger.info("Database tables ready")

    app.extensions['alert_store'] = alert_store or AlertStore(db.session)
    app.extensions['analytics_reader'] = analytics_reader or AnalyticsReader(db.session)

    # Register blueprints
    from routes.alert_routes import alert_bp
    from routes.analytics_routes import analytics_bp
    from routes.health_routes import health_bp
    app.register_blueprint(alert_bp)
    app.register_blueprint(analytics_bp)
    app.register_blueprint(health_bp)

    return app
