"""Shared fixtures: an app backed by a temporary SQLite file."""

import pytest

from fooddelivery import create_app
from fooddelivery.extensions import db
from fooddelivery.models import Restaurant
from fooddelivery.services import RestaurantRepository


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'restaurants.db'}"


@pytest.fixture
def app(db_url):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": db_url,
        "CORS_ORIGIN": "http://localhost:4200",
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def repository(app):
    """A repository bound to the app's scoped session inside an app context."""
    with app.app_context():
        yield RestaurantRepository(db.session)


@pytest.fixture
def seed(app):
    def _seed(*names):
        with app.app_context():
            repo = RestaurantRepository(db.session)
            return [repo.save(Restaurant(name=name)).id for name in names]
    return _seed


@pytest.fixture
def drop_table(app):
    """Simulate a broken database by dropping the restaurants table."""
    def _drop():
        with app.app_context():
            Restaurant.__table__.drop(db.engine)
    return _drop
