from datetime import datetime, timezone
from enum import Enum
from flask_login import UserMixin
from app.extensions import db


def utcnow():
    """Naive UTC timestamp, the form stored in DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# ============================================================
# ENUMS
# ============================================================
class ProfileType(str, Enum):
    CLIENT = 'client'
    CONTRACTOR = 'contractor'


class ContractStatus(str, Enum):
    NEW = 'new'
    IN_PROGRESS = 'in_progress'
    TERMINATED = 'terminated'


# ============================================================
# PROFILE MODEL
# ============================================================
class Profile(UserMixin, db.Model):
    """
    An actor in the marketplace: either a client or a contractor.

    The profile is resolved from the `profile_id` request header and acts
    as the Flask-Login user for the request.

    CRITICAL: 'balance' is only changed by payment_service (pay/deposit).
    """
    __tablename__ = 'profiles'

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    profession = db.Column(db.String(100), nullable=False)
    balance = db.Column(db.Float, default=0.0, nullable=False)

    # 'client' or 'contractor'
    type = db.Column(db.String(20), nullable=False)

    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    client_contracts = db.relationship('Contract', backref='client', lazy='dynamic',
                                       foreign_keys='Contract.client_id')
    contractor_contracts = db.relationship('Contract', backref='contractor', lazy='dynamic',
                                           foreign_keys='Contract.contractor_id')

    @property
    def full_name(self):
        return f'{self.first_name} {self.last_name}'

    def is_client(self):
        return self.type == ProfileType.CLIENT.value

    def to_dict(self):
        return {
            'id': self.id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'profession': self.profession,
            'balance': self.balance,
            'type': self.type,
        }

    def __repr__(self):
        return f'<Profile {self.full_name} ({self.type})>'


# ============================================================
# CONTRACT MODEL
# ============================================================
class Contract(db.Model):
    """
    Agreement between exactly one client and one contractor.

    Lifecycle: new -> in_progress -> terminated
    Terminated contracts are hidden from contract listings.
    """
    __tablename__ = 'contracts'

    id = db.Column(db.Integer, primary_key=True)
    terms = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), default=ContractStatus.NEW.value, nullable=False)

    client_id = db.Column(db.Integer, db.ForeignKey('profiles.id'), nullable=False)
    contractor_id = db.Column(db.Integer, db.ForeignKey('profiles.id'), nullable=False)

    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    jobs = db.relationship('Job', backref='contract', lazy='dynamic',
                           cascade='all, delete-orphan')

    def to_dict(self):
        return {
            'id': self.id,
            'terms': self.terms,
            'status': self.status,
            'client_id': self.client_id,
            'contractor_id': self.contractor_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Contract {self.id} status={self.status}>'


# ============================================================
# JOB MODEL
# ============================================================
class Job(db.Model):
    """
    A unit of billable work under a contract.

    'paid' is tri-state in storage: NULL = unpaid, True = paid.
    It flips NULL -> True exactly once, together with payment_date.
    """
    __tablename__ = 'jobs'

    id = db.Column(db.Integer, primary_key=True)
    description = db.Column(db.Text, nullable=False)
    price = db.Column(db.Float, nullable=False)  # Must be > 0
    paid = db.Column(db.Boolean, nullable=True, default=None)
    payment_date = db.Column(db.DateTime, nullable=True)

    contract_id = db.Column(db.Integer, db.ForeignKey('contracts.id'), nullable=False)

    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    def is_paid(self):
        return bool(self.paid)

    def to_dict(self):
        return {
            'id': self.id,
            'description': self.description,
            'price': self.price,
            'paid': self.paid,
            'payment_date': self.payment_date.isoformat() if self.payment_date else None,
            'contract_id': self.contract_id,
        }

    def __repr__(self):
        return f'<Job {self.id} price={self.price} paid={self.is_paid()}>'
