import logging

from app import create_app
from config import Config

logger = logging.getLogger(__name__)

Config.validate()
app = create_app(Config)

if __name__ == '__main__':
    logger.info(f"Server is running on http://localhost:{Config.PORT}")
    app.run(host=Config.HOST, port=Config.PORT)
