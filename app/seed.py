"""
Demo data for local development (`flask --app run seed-db`).
"""

from datetime import datetime
from app.extensions import db
from app.models import Profile, Contract, Job, ProfileType, ContractStatus

PROFILES = [
    (1, 'Harry', 'Potter', 'Wizard', 1150, ProfileType.CLIENT),
    (2, 'Mr', 'Robot', 'Hacker', 231.11, ProfileType.CLIENT),
    (3, 'John', 'Snow', 'Knows nothing', 451.3, ProfileType.CLIENT),
    (4, 'Ash', 'Kethcum', 'Pokemon master', 1.3, ProfileType.CLIENT),
    (5, 'John', 'Lenon', 'Musician', 64, ProfileType.CONTRACTOR),
    (6, 'Linus', 'Torvalds', 'Programmer', 1214, ProfileType.CONTRACTOR),
    (7, 'Alan', 'Turing', 'Programmer', 22, ProfileType.CONTRACTOR),
    (8, 'Aragorn', 'II Elessar Telcontarion', 'Fighter', 314, ProfileType.CONTRACTOR),
]

# (id, status, client_id, contractor_id)
CONTRACTS = [
    (1, ContractStatus.TERMINATED, 1, 5),
    (2, ContractStatus.IN_PROGRESS, 1, 6),
    (3, ContractStatus.IN_PROGRESS, 2, 6),
    (4, ContractStatus.IN_PROGRESS, 2, 7),
    (5, ContractStatus.NEW, 3, 8),
    (6, ContractStatus.IN_PROGRESS, 3, 7),
    (7, ContractStatus.IN_PROGRESS, 4, 7),
    (8, ContractStatus.IN_PROGRESS, 4, 6),
    (9, ContractStatus.IN_PROGRESS, 4, 8),
]

# (description, price, contract_id, payment_date or None)
JOBS = [
    ('work', 200, 1, None),
    ('work', 201, 2, None),
    ('work', 202, 3, None),
    ('work', 200, 4, None),
    ('work', 200, 7, None),
    ('work', 2020, 7, datetime(2020, 8, 15, 19, 11, 26)),
    ('work', 200, 2, datetime(2020, 8, 15, 19, 11, 26)),
    ('work', 200, 3, datetime(2020, 8, 16, 19, 11, 26)),
    ('work', 200, 1, datetime(2020, 8, 17, 19, 11, 26)),
    ('work', 200, 5, datetime(2020, 8, 17, 19, 11, 26)),
    ('work', 21, 1, datetime(2020, 8, 10, 19, 11, 26)),
    ('work', 21, 2, datetime(2020, 8, 15, 19, 11, 26)),
    ('work', 121, 3, datetime(2020, 8, 15, 19, 11, 26)),
    ('work', 121, 3, datetime(2020, 8, 14, 23, 11, 26)),
]


def seed_database(session, reset=False):
    """Insert the demo profiles, contracts and jobs."""
    if reset:
        db.drop_all()
        db.create_all()

    for profile_id, first_name, last_name, profession, balance, kind in PROFILES:
        session.add(Profile(
            id=profile_id,
            first_name=first_name,
            last_name=last_name,
            profession=profession,
            balance=balance,
            type=kind.value
        ))

    for contract_id, status, client_id, contractor_id in CONTRACTS:
        session.add(Contract(
            id=contract_id,
            terms='bla bla bla',
            status=status.value,
            client_id=client_id,
            contractor_id=contractor_id
        ))

    for description, price, contract_id, payment_date in JOBS:
        session.add(Job(
            description=description,
            price=price,
            contract_id=contract_id,
            paid=True if payment_date else None,
            payment_date=payment_date
        ))

    session.commit()
