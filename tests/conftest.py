"""
Pytest fixtures: a fresh app and in-memory database per test.

HTTP tests never hold an app context open across requests, so each
request resolves its profile from the header on its own. Rows are read
back through `fetch`, in a separate context.
"""

from datetime import datetime

import pytest

from app import create_app
from app.extensions import db as _db
from app.models import Profile, Contract, Job, ProfileType, ContractStatus
from config import TestConfig

HARRY = 1       # client, balance 150
ROBOT = 2       # client, balance 500
LINUS = 3       # contractor, Programmer, balance 20
LENNON = 4      # contractor, Musician, balance 0
IDLE = 5        # client with no contracts, balance 10


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        _seed()
    yield app
    with app.app_context():
        _db.drop_all()


@pytest.fixture
def file_app(tmp_path):
    """App on a SQLite file, so separate sessions use separate connections."""

    class FileConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'marketplace.db'}"

    app = create_app(FileConfig)
    with app.app_context():
        _seed()
    yield app
    with app.app_context():
        _db.drop_all()
        _db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    """Session for service-level tests that make no HTTP requests."""
    with app.app_context():
        yield _db.session


@pytest.fixture
def fetch(app):
    """Load one row as a fresh request would see it."""
    def load(model, pk):
        with app.app_context():
            return _db.session.get(model, pk)
    return load


@pytest.fixture
def insert(app):
    def add(*rows):
        with app.app_context():
            _db.session.add_all(rows)
            _db.session.commit()
    return add


@pytest.fixture
def as_profile(client):
    """GET/POST helpers that send the profile_id header."""

    class ProfileClient:
        def get(self, url, profile_id):
            return client.get(url, headers={'profile_id': str(profile_id)})

        def post(self, url, profile_id, json=None):
            return client.post(url, headers={'profile_id': str(profile_id)}, json=json)

    return ProfileClient()


def _profile(profile_id, first_name, last_name, profession, balance, kind):
    return Profile(id=profile_id, first_name=first_name, last_name=last_name,
                   profession=profession, balance=balance, type=kind.value)


def _seed():
    _db.session.add_all([
        _profile(HARRY, 'Harry', 'Potter', 'Wizard', 150, ProfileType.CLIENT),
        _profile(ROBOT, 'Mr', 'Robot', 'Hacker', 500, ProfileType.CLIENT),
        _profile(LINUS, 'Linus', 'Torvalds', 'Programmer', 20, ProfileType.CONTRACTOR),
        _profile(LENNON, 'John', 'Lennon', 'Musician', 0, ProfileType.CONTRACTOR),
        _profile(IDLE, 'Ash', 'Ketchum', 'Trainer', 10, ProfileType.CLIENT),
    ])
    _db.session.add_all([
        Contract(id=1, terms='c1', status=ContractStatus.IN_PROGRESS.value,
                 client_id=HARRY, contractor_id=LINUS),
        Contract(id=2, terms='c2', status=ContractStatus.NEW.value,
                 client_id=HARRY, contractor_id=LENNON),
        Contract(id=3, terms='c3', status=ContractStatus.TERMINATED.value,
                 client_id=ROBOT, contractor_id=LINUS),
        Contract(id=4, terms='c4', status=ContractStatus.IN_PROGRESS.value,
                 client_id=ROBOT, contractor_id=LENNON),
    ])
    _db.session.add_all([
        # Harry owes 200 across unpaid jobs 1 and 2
        Job(id=1, description='kernel patch', price=100, contract_id=1),
        Job(id=2, description='driver fix', price=100, contract_id=1),
        Job(id=3, description='album', price=300, contract_id=2, paid=True,
            payment_date=datetime(2024, 1, 10, 9, 0)),
        Job(id=4, description='code review', price=50, contract_id=3, paid=True,
            payment_date=datetime(2024, 2, 1, 12, 0)),
        Job(id=5, description='concert', price=400, contract_id=4, paid=True,
            payment_date=datetime(2024, 3, 5, 18, 30)),
        # Robot owes 80
        Job(id=6, description='single', price=80, contract_id=4),
    ])
    _db.session.commit()
