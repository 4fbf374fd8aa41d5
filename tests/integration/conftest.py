import os
import sys

import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from app import create_app
from app.extensions import db
from app.models.owner import Owner
from app.models.pet import Pet


def _assert_memory_db(uri: str):
    if uri != "sqlite:///:memory:":
        raise RuntimeError(
            f"Refusing to run tests on non-memory DB: {uri!r}. "
            "This guard protects your real database."
        )


@pytest.fixture(scope="function")
def app():
    os.environ.pop("DATABASE_URL", None)

    flask_app = create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret-key",
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "SQLALCHEMY_ENGINE_OPTIONS": {"connect_args": {"check_same_thread": False}},
            "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        }
    )

    _assert_memory_db(flask_app.config["SQLALCHEMY_DATABASE_URI"])

    with flask_app.app_context():
        db.create_all()
        yield flask_app
        _assert_memory_db(flask_app.config["SQLALCHEMY_DATABASE_URI"])
        db.session.remove()
        db.drop_all()

@pytest.fixture()
def client(app):
    return app.test_client()

@pytest.fixture()
def make_owner(app):
    def _make_owner(name: str, email: str | None = None):
        o = Owner(name=name, email=email)
        db.session.add(o)
        db.session.commit()
        return o
    return _make_owner

@pytest.fixture()
def make_pet(app):
    def _make_pet(name: str, owner=None, **attrs):
        p = Pet(name=name, owner_id=owner.id if owner else None, **attrs)
        db.session.add(p)
        db.session.commit()
        return p
    return _make_pet


@pytest.fixture()
def sample_data(app, make_owner, make_pet):
    owner = make_owner("Owner", "owner@example.com")
    other = make_owner("Other", "other@example.com")
    cat = make_pet("Roshlyo", owner, species="Cat", breed="Street Queen", age=7)
    dog = make_pet("Rex", owner, species="Dog", breed="Labrador", age=3)
    stray = make_pet("Sisi", None, species="Cat")

    return {
        "owner": owner,
        "other": other,
        "cat": cat,
        "dog": dog,
        "stray": stray,
    }
