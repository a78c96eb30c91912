"""
BALANCE ROUTES
==============
"""

from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user
from app.extensions import db
from app.services.payment_service import deposit_balance

balances_bp = Blueprint('balances', __name__)


# ============== DEPOSIT ==============
@balances_bp.route('/balances/deposit/<int:user_id>', methods=['POST'])
@login_required
def deposit(user_id):
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}

    client = deposit_balance(
        db.session,
        target_user_id=user_id,
        profile_id=current_user.id,
        amount=payload.get('amount')
    )

    return jsonify({'message': 'Deposit successful', 'balance': client.balance})
