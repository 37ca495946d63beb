"""
Shared fixtures: an application bound to an in-memory database seeded with
the default module types, plus factories for users, courses and modules.
"""
import itertools

import pytest

from singleactivity import create_app
from singleactivity.extensions import db as _db
from singleactivity.commands import seed_module_types
from singleactivity.models.user import User
from singleactivity.application.course.create_course import create_course
from singleactivity.application.course.add_module import add_module
from singleactivity.utils.tokens import issue_tokens

_counter = itertools.count(1)


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        seed_module_types()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def make_user(app):
    def _make(role="student", password="secret"):
        user = User()
        user.email = f"{role}{next(_counter)}@example.com"
        user.role = role
        user.set_password(password)
        _db.session.add(user)
        _db.session.commit()
        return user
    return _make


@pytest.fixture
def login(make_user):
    """Create a user of ``role`` and return (user, headers, sesskey)."""
    def _login(role="student"):
        user = make_user(role)
        tokens = issue_tokens(user)
        headers = {"Authorization": f"Bearer {tokens['access_token']}"}
        return user, headers, tokens["sesskey"]
    return _login


@pytest.fixture
def make_course(app):
    def _make(activitytype="forum"):
        n = next(_counter)
        data = {"fullname": f"Course {n}", "shortname": f"C{n}"}
        if activitytype is not None:
            data["format_options"] = {"activitytype": activitytype}
        return create_course(actor_id="tests", data=data)
    return _make


@pytest.fixture
def add_cm(app):
    def _add(course, modname, section=0, name=None, visible=True):
        return add_module(
            course_id=course.id,
            modname=modname,
            sectionnum=section,
            data={"name": name or f"{modname} {next(_counter)}", "visible": visible},
        )
    return _add
