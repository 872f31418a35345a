from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest, NotFound

from lifelink.services.blood_types import all_blood_type_details, blood_type_details
from lifelink.services.forecasting import (
    BLOOD_TYPE_FORECAST,
    METRIC_BASES,
    RANGE_POINTS,
    generate_time_series,
    shortage_analysis,
)
from lifelink.services.insights import donor_heatmap, site_statistics

insights_bp = Blueprint('insights_bp', __name__)


@insights_bp.route('/insights/forecast', methods=['GET'])
def get_forecast():
    try:
        metric = request.args.get('metric', 'demand').lower()
        time_range = request.args.get('range', 'week').lower()
        if metric not in METRIC_BASES:
            raise BadRequest(f"metric must be one of: {', '.join(METRIC_BASES)}")
        if time_range not in RANGE_POINTS:
            raise BadRequest(f"range must be one of: {', '.join(RANGE_POINTS)}")

        return jsonify({
            'metric': metric,
            'range': time_range,
            'series': generate_time_series(metric, time_range),
            'bloodTypes': [dict(row) for row in BLOOD_TYPE_FORECAST]
        }), 200
    except BadRequest as e:
        return jsonify({'error': e.description}), 400


@insights_bp.route('/insights/shortage', methods=['GET'])
def get_shortage():
    return jsonify(shortage_analysis()), 200


@insights_bp.route('/insights/heatmap', methods=['GET'])
def get_heatmap():
    try:
        lat = request.args.get('lat')
        lng = request.args.get('lng')
        origin = None
        if lat is not None or lng is not None:
            try:
                origin = (float(lat), float(lng))
            except (TypeError, ValueError):
                raise BadRequest('lat and lng must both be numbers')
            if not (-90 <= origin[0] <= 90 and -180 <= origin[1] <= 180):
                raise BadRequest('lat/lng out of range')

        return jsonify(donor_heatmap(origin)), 200
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
    except Exception:
        current_app.logger.exception('Error building donor heatmap')
        return jsonify({'error': 'Failed to build donor heatmap'}), 500


@insights_bp.route('/statistics', methods=['GET'])
def get_statistics():
    return jsonify(site_statistics()), 200


@insights_bp.route('/blood-types', methods=['GET'])
def get_blood_types():
    return jsonify(all_blood_type_details()), 200


@insights_bp.route('/blood-types/<path:blood_type>', methods=['GET'])
def get_blood_type(blood_type):
    try:
        details = blood_type_details(blood_type)
        if details is None:
            raise NotFound(f'Unknown blood type: {blood_type}')
        return jsonify(details), 200
    except NotFound as e:
        return jsonify({'error': e.description}), 404
