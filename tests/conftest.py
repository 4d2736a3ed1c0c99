import io
import sqlite3

import pytest

from console import Console
from database import Database
from network_system import NetworkSystem


def make_database():
    conn = sqlite3.connect(":memory:")
    return Database(conn, paramstyle="qmark", error_class=sqlite3.Error, out=io.StringIO())


@pytest.fixture
def db():
    database = make_database()
    database.create_tables()
    yield database
    database.close()


@pytest.fixture
def scripted():
    """Console that answers prompts with the given lines"""
    def make(*lines):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        return Console(stdin=stdin, stdout=io.StringIO(), stderr=io.StringIO())
    return make


@pytest.fixture
def session(db, scripted):
    def make(*lines):
        return NetworkSystem(db, scripted(*lines))
    return make


@pytest.fixture
def add_user(db):
    def add(user_id, password="pw", name=None):
        db.execute_update(
            "INSERT INTO USR (userId, password, email, name, dateOfBirth) VALUES (%s, %s, %s, %s, %s)",
            (user_id, password, f"{user_id}@example.com", name or user_id.title(), "1990/01/01")
        )
    return add


def output(system):
    return system.console.stdout.getvalue()


def errors(system):
    return system.console.stderr.getvalue()
