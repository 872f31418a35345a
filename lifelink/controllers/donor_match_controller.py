from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest, NotFound, Unauthorized

from lifelink.schemas import MatchSearchRequest, NotifyRequest, parse_body
from lifelink.services.matching import (
    URGENCY_LEVELS,
    find_matching_donors,
    get_demo_donor,
    is_valid_hospital_key,
    notification_text,
)
from lifelink.services.notifications import send_notification

# Define Blueprint for the hospital donor matching demo
donor_match_bp = Blueprint('donor_match_bp', __name__)

API_KEY_HEADER = 'X-Hospital-Api-Key'


def require_hospital_key():
    min_length = current_app.config.get('HOSPITAL_API_KEY_MIN_LENGTH', 6)
    if not is_valid_hospital_key(request.headers.get(API_KEY_HEADER), min_length):
        raise Unauthorized('A valid hospital API key is required')


@donor_match_bp.route('/urgency-levels', methods=['GET'])
def get_urgency_levels():
    return jsonify([{'value': key, 'label': label} for key, label in URGENCY_LEVELS.items()]), 200


@donor_match_bp.route('/search', methods=['POST'])
def search_donors():
    try:
        require_hospital_key()
        payload, error = parse_body(MatchSearchRequest, request.get_json(silent=True))
        if error:
            raise BadRequest(error)

        donors = find_matching_donors(payload.blood_type, payload.urgency)
        return jsonify({
            'bloodType': payload.blood_type,
            'urgency': payload.urgency,
            'donors': [donor.to_dict() for donor in donors]
        }), 200
    except Unauthorized as e:
        return jsonify({'error': e.description}), 401
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
    except Exception:
        current_app.logger.exception('Error matching donors')
        return jsonify({'error': 'Failed to match donors'}), 500


@donor_match_bp.route('/notify', methods=['POST'])
def notify_donor():
    try:
        require_hospital_key()
        payload, error = parse_body(NotifyRequest, request.get_json(silent=True))
        if error:
            raise BadRequest(error)

        donor = get_demo_donor(payload.donor_id, payload.blood_type)
        if not donor:
            raise NotFound('Donor not found')

        message = notification_text(donor, payload.blood_type, payload.urgency)
        sent = send_notification(f'{payload.blood_type} blood donation request', message)
        current_app.logger.info('Notification sent to donor %s for %s blood donation',
                                donor.name, payload.blood_type)

        return jsonify({
            'notified': True,
            'emailed': sent,
            'donor': donor.to_dict(),
            'message': message
        }), 200
    except Unauthorized as e:
        return jsonify({'error': e.description}), 401
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
    except NotFound as e:
        return jsonify({'error': e.description}), 404
    except Exception:
        current_app.logger.exception('Error notifying donor')
        return jsonify({'error': 'Failed to notify donor'}), 500
