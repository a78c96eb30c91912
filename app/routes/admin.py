"""
ADMIN ROUTES
============

Reporting over paid jobs within a time window:
- Best profession
- Best clients

These routes are not gated by the profile header.
"""

from flask import Blueprint, current_app, jsonify, request
from app.extensions import db
from app.services.admin_service import (
    parse_time_range, parse_limit, get_best_profession, get_best_clients
)

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')


# ============== BEST PROFESSION ==============
@admin_bp.route('/best-profession')
def best_profession():
    start, end = parse_time_range(request.args.get('start'), request.args.get('end'))
    return jsonify(get_best_profession(db.session, start, end))


# ============== BEST CLIENTS ==============
@admin_bp.route('/best-clients')
def best_clients():
    start, end = parse_time_range(request.args.get('start'), request.args.get('end'))
    limit = parse_limit(
        request.args.get('limit'),
        default=current_app.config['BEST_CLIENTS_DEFAULT_LIMIT']
    )
    return jsonify(get_best_clients(db.session, start, end, limit=limit))
