"""
Pytest configuration and fixtures
Each test gets a fresh in-memory database with lookup data seeded
"""
import pytest
from freshstock import create_app
from freshstock import db as _db
from freshstock.build import build_database


@pytest.fixture(scope='function')
def app():
    """Create Flask application for testing"""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'LOG_TO_DATABASE': False,
    })

    with app.app_context():
        build_database()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create Flask test client"""
    return app.test_client()


@pytest.fixture(scope='function')
def seed(app):
    """Insert model rows directly, one flush per row in the order given"""
    def _seed(*rows):
        for row in rows:
            _db.session.add(row)
            _db.session.flush()
        _db.session.commit()
        return rows
    return _seed
