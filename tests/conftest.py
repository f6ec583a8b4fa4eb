"""
Pytest configuration and fixtures
"""
import pytest

from app import create_app
from app.config import TestingConfig
from app.extensions import db as _db
from app.models import School, SchoolOption, Student, User


@pytest.fixture()
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db(app):
    return _db


def _make_user(email, role, password="secret123"):
    user = User(email=email, role=role)
    user.set_password(password)
    _db.session.add(user)
    _db.session.flush()
    return user


@pytest.fixture()
def admin_user(app):
    user = _make_user("admin@example.com", "admin")
    _db.session.commit()
    return user


@pytest.fixture()
def school(app):
    user = _make_user("school@example.com", "school")
    school = School(user_id=user.id, school_name="Kings College", contact_email="office@kings.edu")
    _db.session.add(school)
    _db.session.commit()
    return school


@pytest.fixture()
def student(app, school):
    user = _make_user("ada@example.com", "student")
    student = Student(
        user_id=user.id,
        first_name="Ada",
        last_name="Obi",
        email=user.email,
        school_id=school.id
    )
    _db.session.add(student)
    _db.session.commit()
    return student


@pytest.fixture()
def university(app):
    option = SchoolOption(school_name="University of Lagos", school_type="University", location="Lagos")
    _db.session.add(option)
    _db.session.commit()
    return option


@pytest.fixture()
def login(client):
    """Log a user in by writing the session directly."""
    def _login(user):
        with client.session_transaction() as sess:
            sess["user_id"] = user.id
            sess["email"] = user.email
            sess["role"] = user.role
        return client
    return _login
