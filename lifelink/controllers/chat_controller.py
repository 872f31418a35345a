from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from lifelink.schemas import ChatRequest, parse_body
from lifelink.services.chat import generate_response

chat_bp = Blueprint('chat_bp', __name__)


@chat_bp.route('', methods=['POST'])
def chat():
    try:
        payload, error = parse_body(ChatRequest, request.get_json(silent=True))
        if error:
            raise BadRequest(error)
        if not payload.message:
            raise BadRequest('Message is required')

        return jsonify({'response': generate_response(payload.message)}), 200
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
    except Exception:
        current_app.logger.exception('Error processing chat request')
        return jsonify({'error': 'Failed to process request'}), 500
