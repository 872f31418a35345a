from flask import Blueprint, current_app, jsonify
from werkzeug.exceptions import BadRequest

from lifelink.services.dashboard import hospital_dashboard

hospital_bp = Blueprint('hospital_bp', __name__)


@hospital_bp.route('/', methods=['GET'])
@hospital_bp.route('/<hospital_id>', methods=['GET'])
def get_hospital(hospital_id=None):
    try:
        if not hospital_id or not hospital_id.strip():
            raise BadRequest('Hospital ID is required')
        return jsonify(hospital_dashboard(hospital_id.strip())), 200
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
    except Exception:
        current_app.logger.exception('Error fetching hospital data')
        return jsonify({'error': 'Failed to fetch hospital data'}), 500
