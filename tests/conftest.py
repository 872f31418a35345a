import pytest

from lifelink import create_app
from lifelink.config import TestingConfig
from lifelink.extensions import db, scheduler


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()
    # pending emergency jobs live on the shared scheduler
    scheduler.remove_all_jobs()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def hospital_headers():
    return {'X-Hospital-Api-Key': 'demo-hospital-key'}
