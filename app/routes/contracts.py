"""
CONTRACT ROUTES
===============

Read-only, scoped to the profile in the `profile_id` header.
"""

from flask import Blueprint, jsonify
from flask_login import login_required, current_user
from app.extensions import db
from app.routes.listing import listing_response
from app.services.contract_service import get_contract, list_contracts

contracts_bp = Blueprint('contracts', __name__)


# ============== VIEW CONTRACT ==============
@contracts_bp.route('/contracts/<int:contract_id>')
@login_required
def view_contract(contract_id):
    contract = get_contract(db.session, contract_id, current_user.id)
    return jsonify(contract.to_dict())


# ============== LIST CONTRACTS ==============
@contracts_bp.route('/contracts')
@login_required
def list_profile_contracts():
    """Non-terminated contracts where the caller is client or contractor"""
    return listing_response(list_contracts(db.session, current_user.id))
