"""
JOB ROUTES
==========

Uses payment_service for paying jobs.
Payment is atomic: balances and job state change together or not at all.
"""

from flask import Blueprint, jsonify
from flask_login import login_required, current_user
from app.extensions import db
from app.routes.listing import listing_response
from app.services.contract_service import list_unpaid_jobs
from app.services.payment_service import pay_job

jobs_bp = Blueprint('jobs', __name__)


# ============== UNPAID JOBS ==============
@jobs_bp.route('/jobs/unpaid')
@login_required
def unpaid_jobs():
    """Unpaid jobs on the caller's in-progress contracts"""
    return listing_response(list_unpaid_jobs(db.session, current_user.id))


# ============== PAY JOB ==============
@jobs_bp.route('/jobs/<int:job_id>/pay', methods=['POST'])
@login_required
def pay(job_id):
    job = pay_job(db.session, job_id, current_user.id)
    return jsonify({'message': 'Payment successful', 'job': job.to_dict()})
