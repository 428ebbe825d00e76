import os

os.environ["ENV"] = "test"

import pytest
from sqlmodel import Session
from showtracker.main import app  # noqa: F401  registers every table
from showtracker.database import init_db, engine, drop_all_tables
from showtracker.models import User, Show, Genre


@pytest.fixture(scope="function", autouse=True)
def setup_test_db():
    init_db()  # Create all tables in in-memory SQLite
    yield
    drop_all_tables()


@pytest.fixture(name="session")
def session_fixture():
    with Session(engine) as session:
        yield session


@pytest.fixture
def test_user_data():
    return {
        "username": "tomscott",
        "password": "password"
    }

@pytest.fixture
def test_show_data():
    return {
        "title": "two and a half men",
        "genre": "Comedy",
        "rating": 7,
        "status": "watching"
    }

@pytest.fixture
def created_user(session, test_user_data, test_show_data):
    # A user already tracking one show
    user = User(**test_user_data)
    user.shows = [Show(**{**test_show_data, "genre": Genre(test_show_data["genre"])})]
    session.add(user)
    session.commit()
    session.refresh(user)
    return user

@pytest.fixture
def user_without_shows(session):
    user = User(username="noshows", password="secret1")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user

@pytest.fixture
def network_codes():
    return {
        "ok": 200,
        "created": 201,
        "bad_request": 400,
        "not_found": 404
    }
