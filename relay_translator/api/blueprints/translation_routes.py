"""
Relay translation routes
"""
from flask import Blueprint, request, jsonify

from relay_translator.config import MIN_CHAIN_ROUNDS, MAX_CHAIN_ROUNDS


def _read_text(data):
    """Return (text, error message) for a request body"""
    if not isinstance(data, dict):
        return None, "Request body must be a JSON object"
    text = data.get('text')
    if not isinstance(text, str) or not text.strip():
        return None, "Missing or empty field: text"
    return text, None


def _relay_error_response(error):
    return jsonify({
        "error": f"Translation error: {error.cause}",
        "stage": error.stage.value
    }), 500


def create_translation_blueprint(orchestrator, logger):
    """
    Create and configure the translation blueprint

    Args:
        orchestrator: RelayOrchestrator serving the requests
        logger: UnifiedLogger for request-level lines
    """
    bp = Blueprint('translation', __name__)

    @bp.route('/api/translate', methods=['POST'])
    def translate_request():
        """Relay one text through a random intermediate language"""
        text, problem = _read_text(request.get_json(silent=True))
        if problem:
            logger.warn("rejected translation request", "reason", problem,
                        "client_ip", request.remote_addr or "")
            return jsonify({"error": problem}), 400

        logger.info("translation request received",
                    "client_ip", request.remote_addr or "",
                    "user_agent", request.headers.get('User-Agent', ''),
                    "text_length", len(text))

        outcome = orchestrator.execute(text)
        if outcome.is_err():
            return _relay_error_response(outcome.unwrap_err())
        return jsonify(outcome.unwrap().to_dict())

    @bp.route('/api/translate/chain', methods=['POST'])
    def translate_chain_request():
        """Relay a text several times, each round feeding the next"""
        data = request.get_json(silent=True)
        text, problem = _read_text(data)
        if problem:
            return jsonify({"error": problem}), 400

        rounds = data.get('rounds', 5)
        if isinstance(rounds, bool) or not isinstance(rounds, int) \
                or not MIN_CHAIN_ROUNDS <= rounds <= MAX_CHAIN_ROUNDS:
            return jsonify({
                "error": f"rounds must be an integer between {MIN_CHAIN_ROUNDS} and {MAX_CHAIN_ROUNDS}"
            }), 400

        logger.info("chain translation request received",
                    "text_length", len(text),
                    "repeat_count", rounds)

        outcome = orchestrator.execute_chain(text, rounds)
        if outcome.is_err():
            return _relay_error_response(outcome.unwrap_err())
        return jsonify(outcome.unwrap().to_dict())

    return bp
