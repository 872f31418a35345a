from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import (
    create_access_token,
    get_jwt_identity,
    set_access_cookies,
    unset_jwt_cookies,
    verify_jwt_in_request,
)
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import BadRequest, Unauthorized

from lifelink.extensions import bcrypt, db
from lifelink.models import ACCOUNT_MODELS
from lifelink.schemas import LoginRequest, RegisterRequest, parse_body
from lifelink.services.dashboard import DEMO_SESSION_USER

auth_bp = Blueprint('auth_bp', __name__)

# Which table a login checks, per LOGIN_VARIANT and userType
LOGIN_TABLES = {
    'members': lambda user_type: 'hospitals' if user_type == 'hospital' else 'donors',
    'accounts': lambda user_type: 'admins' if user_type == 'admin' else 'users',
}

REGISTER_TABLES = {'donor': 'donors', 'hospital': 'hospitals'}


def login_model(user_type):
    variant = current_app.config.get('LOGIN_VARIANT', 'members')
    if variant not in LOGIN_TABLES:
        raise RuntimeError(f'Unknown LOGIN_VARIANT: {variant}')
    return ACCOUNT_MODELS[LOGIN_TABLES[variant](user_type)]


def password_matches(stored, password):
    if not stored:
        return False
    try:
        return bcrypt.check_password_hash(stored, password)
    except ValueError:
        # not a bcrypt hash
        return False


@auth_bp.route('/login', methods=['POST'])
def login():
    try:
        payload, error = parse_body(LoginRequest, request.get_json(silent=True))
        if error:
            raise BadRequest(error)
        if not payload.email or not payload.password:
            raise BadRequest('Email and password are required')

        model = login_model(payload.user_type)
        account = model.query.filter_by(email=payload.email).first()
        if not account or not password_matches(account.password, payload.password):
            raise Unauthorized('Invalid credentials')

        token = create_access_token(identity=f'{model.__tablename__}:{account.id}')
        response = jsonify({
            'success': True,
            'message': 'Login successful',
            'user': account.to_dict(),
            'token': token
        })
        set_access_cookies(response, token)
        return response, 200
    except BadRequest as e:
        return jsonify({'success': False, 'message': e.description}), 400
    except Unauthorized as e:
        return jsonify({'success': False, 'message': e.description}), 401
    except SQLAlchemyError as e:
        current_app.logger.error('Login route database error: %s', e)
        return jsonify({'success': False, 'message': 'Server error: database unavailable'}), 500
    except Exception as e:
        current_app.logger.exception('Login route error')
        return jsonify({'success': False, 'message': f'Server error: {e}'}), 500


@auth_bp.route('/register', methods=['POST'])
def register():
    try:
        payload, error = parse_body(RegisterRequest, request.get_json(silent=True))
        if error:
            raise BadRequest(error)

        model = ACCOUNT_MODELS[REGISTER_TABLES[payload.type]]
        if model.query.filter_by(email=payload.email).first():
            raise BadRequest('Email is already in use')

        fields = {
            'name': payload.name,
            'email': payload.email,
            'password': bcrypt.generate_password_hash(payload.password).decode('utf-8'),
        }
        if payload.type == 'donor':
            fields['blood_type'] = payload.blood_type
            extra = {'bloodType': payload.blood_type}
        else:
            fields['location'] = payload.location.strip()
            extra = {'location': fields['location']}

        account = model(**fields)
        db.session.add(account)
        db.session.commit()

        return jsonify({
            'success': True,
            'message': 'Registration successful',
            'user': dict({'id': account.id, 'name': account.name, 'email': account.email,
                          'type': payload.type}, **extra)
        }), 201
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error('Error during registration: %s', e)
        return jsonify({'error': 'Failed to process registration request'}), 500


def session_identity():
    try:
        verify_jwt_in_request(optional=True)
    except (JWTExtendedException, PyJWTError) as e:
        # expired, malformed or foreign tokens count as no token
        current_app.logger.info('Ignoring unusable session token: %s', e)
        return None
    return get_jwt_identity()


@auth_bp.route('/session', methods=['GET'])
def session():
    try:
        identity = session_identity()
        if identity:
            table, _, account_id = identity.partition(':')
            model = ACCOUNT_MODELS.get(table)
            account = db.session.get(model, int(account_id)) if model and account_id.isdigit() else None
            if account is not None:
                return jsonify({'user': account.to_dict()}), 200
            current_app.logger.info('Session account %s no longer exists', identity)

        # No usable token: the dashboard demo runs as a fixed donor
        return jsonify({'user': dict(DEMO_SESSION_USER)}), 200
    except SQLAlchemyError as e:
        current_app.logger.error('Session error: %s', e)
        return jsonify({'error': 'Authentication failed'}), 500


@auth_bp.route('/logout', methods=['POST'])
def logout():
    response = jsonify({'success': True, 'message': 'Logged out'})
    unset_jwt_cookies(response)
    return response, 200
