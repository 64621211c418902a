"""
Recruit Portal - Main Routes (Opportunity List)
"""

import logging

from flask import Blueprint, render_template
from flask_login import current_user
from app.extensions import get_backend
from app.services.assignments import companies_for_user
from app.services.supabase import BackendError

main_bp = Blueprint('main', __name__)
logger = logging.getLogger(__name__)


@main_bp.route('/opportunities')
def opportunities():
    """Companies the logged-in user may join; guests get a login prompt."""
    if not current_user.is_authenticated:
        return render_template('opportunities.html', user=None, companies=[])

    try:
        companies = companies_for_user(get_backend(), current_user.id)
    except BackendError as e:
        logger.error('Error fetching user companies: %s', e)
        companies = []

    return render_template(
        'opportunities.html',
        user=current_user,
        companies=companies,
    )
