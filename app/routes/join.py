"""
Recruit Portal - Join / Work Permit Routes
"""

import logging

from flask import Blueprint, current_app, render_template, request, redirect, url_for, flash, session
from flask_login import current_user, login_required
from app.extensions import get_backend
from app.services.assignments import companies_for_user
from app.services.join_flow import JoinFlow, JoinState, FlowError, payment_url
from app.services.supabase import BackendError

join_bp = Blueprint('join', __name__)
logger = logging.getLogger(__name__)


@join_bp.route('/', methods=['GET', 'POST'])
@login_required
def join():
    """Shows the current wizard step; POST starts it for a company."""
    flow = JoinFlow.load(session)

    if request.method == 'POST':
        company = request.form.get('company', '').strip()
        if not company:
            flash('Select a company to join.', 'error')
            return redirect(url_for('main.opportunities'))

        try:
            assigned = {c.name for c in companies_for_user(get_backend(), current_user.id)}
        except BackendError as e:
            logger.error('Error checking assigned companies: %s', e)
            assigned = set()
        if company not in assigned:
            flash('That company is not available to you.', 'error')
            return redirect(url_for('main.opportunities'))

        flow.choose(company)
        flow.save(session)
        return redirect(url_for('join.join'))

    if flow.state is JoinState.JOIN_PROMPT:
        return render_template('join/prompt.html', company=flow.company)
    if flow.state is JoinState.WORK_PERMIT_FORM:
        return render_template('join/work_permit.html', company=flow.company)
    if flow.state is JoinState.REDIRECTING:
        return render_template(
            'join/redirecting.html',
            payment_url=payment_url(current_app.config),
            delay=current_app.config['REDIRECT_DELAY_SECONDS'],
        )
    return redirect(url_for('main.opportunities'))


@join_bp.route('/apply', methods=['POST'])
@login_required
def apply():
    """'Apply Now' moves from the join prompt to the work permit form."""
    return _advance(lambda flow: flow.apply())


@join_bp.route('/complete', methods=['POST'])
@login_required
def complete():
    """'Complete' on the work permit form starts the payment redirect."""
    return _advance(lambda flow: flow.complete())


@join_bp.route('/cancel', methods=['POST'])
@login_required
def cancel():
    flow = JoinFlow.load(session)
    flow.cancel()
    flow.save(session)
    return redirect(url_for('main.opportunities'))


def _advance(step):
    flow = JoinFlow.load(session)
    try:
        step(flow)
    except FlowError as e:
        flash(f'{e}. Please start again from a company card.', 'error')
        return redirect(url_for('main.opportunities'))
    flow.save(session)
    return redirect(url_for('join.join'))
