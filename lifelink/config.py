import os
from datetime import timedelta


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_list(name):
    value = os.getenv(name, '')
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    """Default settings; every value can be overridden from the environment."""

    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'mysql+pymysql://root:@localhost/lifelink')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True, 'pool_size': 10}

    # Auth
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'dev-jwt-secret-key-change-me-please')
    JWT_TOKEN_LOCATION = ['headers', 'cookies']
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(minutes=int(os.getenv('JWT_ACCESS_TOKEN_MINUTES', 60)))
    # kept apart from Flask's own 'session' cookie
    JWT_ACCESS_COOKIE_NAME = os.getenv('LOGIN_COOKIE_NAME', 'lifelink_token')
    JWT_COOKIE_SAMESITE = 'Lax'
    JWT_COOKIE_CSRF_PROTECT = False
    JWT_COOKIE_SECURE = _env_bool('JWT_COOKIE_SECURE')
    # 'members' checks donors/hospitals, 'accounts' checks users/admins
    LOGIN_VARIANT = os.getenv('LOGIN_VARIANT', 'members')

    # Hospital matching demo gate
    HOSPITAL_API_KEY_MIN_LENGTH = 6

    # Mail notifications
    MAIL_SERVER = os.getenv('MAIL_SERVER', 'localhost')
    MAIL_PORT = int(os.getenv('MAIL_PORT', 25))
    MAIL_USE_TLS = _env_bool('MAIL_USE_TLS')
    MAIL_USERNAME = os.getenv('MAIL_USERNAME')
    MAIL_PASSWORD = os.getenv('MAIL_PASSWORD')
    MAIL_DEFAULT_SENDER = os.getenv('MAIL_DEFAULT_SENDER', 'alerts@lifelink.local')
    NOTIFICATION_RECIPIENTS = _env_list('NOTIFICATION_RECIPIENTS')

    # Emergency simulator ticks, in seconds
    SCHEDULER_START = True
    SCHEDULER_API_ENABLED = False
    EMERGENCY_RESPONSE_INTERVAL = float(os.getenv('EMERGENCY_RESPONSE_INTERVAL', 3))
    EMERGENCY_COUNTDOWN_INTERVAL = float(os.getenv('EMERGENCY_COUNTDOWN_INTERVAL', 60))


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SCHEDULER_START = False
    MAIL_SUPPRESS_SEND = True
    NOTIFICATION_RECIPIENTS = ['coordinator@lifelink.test']
    BCRYPT_LOG_ROUNDS = 4
