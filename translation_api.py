"""
Flask web server for the relay translation API
"""
import sys
import atexit
import logging
from datetime import datetime
from flask import Flask
from flask_cors import CORS

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Reduce verbosity of werkzeug (Flask HTTP server logs)
logging.getLogger('werkzeug').setLevel(logging.WARNING)

# Fix Windows console encoding for non-ASCII log lines
if sys.platform == 'win32':
    import codecs
    sys.stdout = codecs.getwriter('utf-8')(sys.stdout.buffer, 'replace')
    sys.stderr = codecs.getwriter('utf-8')(sys.stderr.buffer, 'replace')

from relay_translator.config import HOST, PORT, RelaySettings
from relay_translator.core.context import RelayContext, build_relay_context
from relay_translator.api.routes import configure_routes


def create_app(context: RelayContext = None) -> Flask:
    """
    Create the Flask application

    Args:
        context: Shared relay dependencies; built from the environment when omitted
    """
    if context is None:
        context = build_relay_context(RelaySettings.from_env())
        atexit.register(context.close)

    app = Flask(__name__)
    CORS(app)
    app.extensions['relay_context'] = context

    configure_routes(app, context)
    context.logger.info("router configured")
    return app


if __name__ == '__main__':
    context = build_relay_context(RelaySettings.from_env())
    app = create_app(context)

    logger.info("=" * 60)
    logger.info(f"RELAY TRANSLATION SERVER (Version {datetime.now().strftime('%Y%m%d-%H%M')})")
    logger.info("=" * 60)
    logger.info(f"   - Provider: {context.provider.name}")
    logger.info(f"   - Languages: {len(context.catalog)}")
    logger.info(f"   - API: http://{HOST}:{PORT}/api/translate")
    logger.info(f"   - Health Check: http://{HOST}:{PORT}/api/health")

    if HOST == '0.0.0.0':
        logger.warning("Server is binding to 0.0.0.0 (all network interfaces)")
        logger.warning("   For production, use a proper WSGI server like gunicorn:")
        logger.warning("   gunicorn -w 4 --bind 0.0.0.0:8080 'translation_api:create_app()'")

    context.logger.info("server starting", "port", PORT)
    try:
        app.run(host=HOST, port=PORT, threaded=True)
    finally:
        context.close()
