"""
Health check and language catalog routes
"""
from flask import Blueprint, jsonify

from relay_translator import __version__


def create_config_blueprint(catalog, provider):
    """Create and configure the config blueprint"""
    bp = Blueprint('config', __name__)

    @bp.route('/api/health', methods=['GET'])
    def health_check():
        """API health check endpoint"""
        return jsonify({
            "status": "ok",
            "version": __version__,
            "provider": provider.name
        })

    @bp.route('/api/languages', methods=['GET'])
    def list_languages():
        """Languages eligible as the intermediate hop"""
        return jsonify({
            "languages": [entry.to_dict() for entry in catalog]
        })

    return bp
