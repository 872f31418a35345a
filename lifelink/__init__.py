import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from lifelink.config import Config
from lifelink.extensions import bcrypt, cors, db, jwt, mail, migrate, scheduler
from lifelink.services.emergency import EmergencyRegistry, EmergencyTimers

# Import controllers (blueprints) for each module
from lifelink.controllers.auth_controller import auth_bp
from lifelink.controllers.chat_controller import chat_bp
from lifelink.controllers.donor_controller import donor_bp
from lifelink.controllers.donor_match_controller import donor_match_bp
from lifelink.controllers.emergency_controller import emergency_bp
from lifelink.controllers.hospital_controller import hospital_bp
from lifelink.controllers.insights_controller import insights_bp
from lifelink.commands import seed_demo_command


def configure_logging(app):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s [%(name)s] %(message)s')
    app.logger.setLevel(level)


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code


def create_app(config_class=Config):
    """Flask application factory"""
    app = Flask(__name__)
    app.config.from_object(config_class)
    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    bcrypt.init_app(app)
    jwt.init_app(app)
    mail.init_app(app)
    cors.init_app(app)
    scheduler.init_app(app)

    timers = EmergencyTimers(
        scheduler,
        response_interval=app.config['EMERGENCY_RESPONSE_INTERVAL'],
        countdown_interval=app.config['EMERGENCY_COUNTDOWN_INTERVAL'],
    )
    app.extensions['emergencies'] = EmergencyRegistry(timers)
    if app.config.get('SCHEDULER_START') and not scheduler.running:
        scheduler.start()

    # Register Blueprints with appropriate URL prefixes
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(chat_bp, url_prefix='/api/chat')
    app.register_blueprint(donor_bp, url_prefix='/api/donors')
    app.register_blueprint(hospital_bp, url_prefix='/api/hospitals')
    app.register_blueprint(donor_match_bp, url_prefix='/api/matching')
    app.register_blueprint(emergency_bp, url_prefix='/api/emergencies')
    app.register_blueprint(insights_bp, url_prefix='/api')

    register_error_handlers(app)
    app.cli.add_command(seed_demo_command)

    return app
