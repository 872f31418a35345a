from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from lifelink.schemas import EligibilityRequest, parse_body
from lifelink.services.dashboard import donor_dashboard
from lifelink.services.eligibility import assess

donor_bp = Blueprint('donor_bp', __name__)


@donor_bp.route('/', methods=['GET'])
@donor_bp.route('/<donor_id>', methods=['GET'])
def get_donor(donor_id=None):
    try:
        if not donor_id or not donor_id.strip():
            raise BadRequest('Donor ID is required')
        return jsonify(donor_dashboard(donor_id.strip())), 200
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
    except Exception:
        current_app.logger.exception('Error fetching donor data')
        return jsonify({'error': 'Failed to fetch donor data'}), 500


# Score a registration form submission; nothing is stored
@donor_bp.route('/eligibility', methods=['POST'])
def check_eligibility():
    try:
        payload, error = parse_body(EligibilityRequest, request.get_json(silent=True))
        if error:
            raise BadRequest(error)

        result = assess(payload.age, payload.weight, payload.recent_illness)
        response = result.to_dict()
        response['donor'] = {
            'name': payload.name,
            'bloodType': payload.blood_type,
            'location': payload.location
        }
        return jsonify(response), 200
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
    except Exception:
        current_app.logger.exception('Error scoring eligibility')
        return jsonify({'error': 'Failed to check eligibility'}), 500
