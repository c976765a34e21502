"""
Flask routes for the relay translation API

- blueprints/config_routes.py: Health check and language catalog
- blueprints/translation_routes.py: Single and chained relays
"""
from flask import jsonify

from .blueprints import (
    create_config_blueprint,
    create_translation_blueprint
)


def configure_routes(app, context):
    """
    Configure Flask routes by registering all blueprints

    Args:
        app: Flask application instance
        context: RelayContext holding the shared dependencies
    """
    app.register_blueprint(create_config_blueprint(context.catalog, context.provider))
    app.register_blueprint(create_translation_blueprint(context.orchestrator, context.logger))

    _register_error_handlers(app, context.logger)


def _register_error_handlers(app, logger):
    """Register global error handlers"""

    @app.errorhandler(404)
    def route_not_found(error):
        return jsonify({"error": "API Endpoint not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(500)
    def internal_server_error(error):
        logger.error("internal server error", "error", str(error))
        return jsonify({"error": "Internal server error", "details": str(error)}), 500
