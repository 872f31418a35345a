from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest, NotFound

from lifelink.schemas import EmergencyCreateRequest, parse_body
from lifelink.services.emergency import EmergencyNotFound, EmergencyStateError
from lifelink.services.notifications import send_notification

emergency_bp = Blueprint('emergency_bp', __name__)


def registry():
    return current_app.extensions['emergencies']


def lookup(emergency_id):
    try:
        return registry().get(emergency_id)
    except EmergencyNotFound:
        raise NotFound('Emergency not found')


@emergency_bp.route('/', methods=['GET'])
def list_emergencies():
    return jsonify([event.to_dict() for event in registry().list()]), 200


@emergency_bp.route('/', methods=['POST'])
def create_emergency():
    try:
        payload, error = parse_body(EmergencyCreateRequest, request.get_json(silent=True) or {})
        if error:
            raise BadRequest(error)

        event = registry().create(payload.type, payload.location, payload.blood_types)
        send_notification(f'Emergency: {event.type} at {event.location}', event.alert_message())
        return jsonify(event.to_dict()), 201
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
    except Exception:
        current_app.logger.exception('Error creating emergency')
        return jsonify({'error': 'Failed to create emergency'}), 500


@emergency_bp.route('/<emergency_id>', methods=['GET'])
def get_emergency(emergency_id):
    try:
        return jsonify(lookup(emergency_id).to_dict()), 200
    except NotFound as e:
        return jsonify({'error': e.description}), 404


@emergency_bp.route('/<emergency_id>/resolve', methods=['POST'])
def resolve_emergency(emergency_id):
    try:
        event = registry().resolve(emergency_id)
        return jsonify(event.to_dict()), 200
    except EmergencyNotFound:
        return jsonify({'error': 'Emergency not found'}), 404
    except EmergencyStateError as e:
        return jsonify({'error': str(e)}), 409


# Reset: the event is discarded and its timers cancelled
@emergency_bp.route('/<emergency_id>', methods=['DELETE'])
def reset_emergency(emergency_id):
    try:
        registry().reset(emergency_id)
        return jsonify({'message': 'Emergency reset successfully'}), 200
    except EmergencyNotFound:
        return jsonify({'error': 'Emergency not found'}), 404
