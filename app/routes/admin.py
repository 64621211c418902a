"""
Recruit Portal - Admin Routes
"""

import logging
from functools import wraps
from flask import Blueprint, current_app, render_template, request, redirect, url_for, flash, session
from app.extensions import get_backend
from app.services.assignments import (
    AssignmentError,
    assign_company,
    create_user,
    delete_user,
    list_companies,
    list_users,
    unassign_company,
)
from app.services.auth import check_admin_credentials
from app.services.supabase import BackendError

admin_bp = Blueprint('admin', __name__)
logger = logging.getLogger(__name__)

ADMIN_SESSION_KEY = 'is_admin'
USER_FIELDS = ('username', 'password', 'email', 'full_name')


def admin_required(f):
    """Decorator restricting access to the admin session."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not session.get(ADMIN_SESSION_KEY):
            flash('Admin access only.', 'error')
            return redirect(url_for('admin.login'))
        return f(*args, **kwargs)
    return decorated_function


# ==============================================================================
# ADMIN SESSION
# ==============================================================================

@admin_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login page."""
    if session.get(ADMIN_SESSION_KEY):
        return redirect(url_for('admin.users'))

    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')

        if check_admin_credentials(current_app.config, username, password):
            session[ADMIN_SESSION_KEY] = True
            return redirect(url_for('admin.users'))

        logger.warning('Admin login rejected for %r', username)
        flash('Invalid admin credentials.', 'error')
        return render_template('admin/login.html'), 401

    return render_template('admin/login.html')


@admin_bp.route('/logout')
def logout():
    session.pop(ADMIN_SESSION_KEY, None)
    flash('Admin session closed.', 'info')
    return redirect(url_for('main.opportunities'))


# ==============================================================================
# USER MANAGEMENT
# ==============================================================================

@admin_bp.route('/users')
@admin_required
def users():
    """Lists every user with their companies, plus the create form."""
    backend = get_backend()

    try:
        all_users = list_users(backend)
    except BackendError as e:
        logger.error('Error fetching users: %s', e)
        flash('Could not load users.', 'error')
        all_users = []

    try:
        companies = list_companies(backend)
    except BackendError as e:
        logger.error('Error fetching companies: %s', e)
        companies = []

    return render_template('admin/users.html', users=all_users, companies=companies)


@admin_bp.route('/users/create', methods=['POST'])
@admin_required
def create():
    """Creates a user and its company assignments."""
    fields = {name: request.form.get(name, '').strip() for name in USER_FIELDS}
    fields['password'] = request.form.get('password', '')
    company_ids = request.form.getlist('companies', type=int)

    if not all(fields.values()):
        flash('Fill in every required field.', 'error')
        return redirect(url_for('admin.users'))

    try:
        user = create_user(get_backend(), company_ids=company_ids, **fields)
    except AssignmentError as e:
        logger.error('Error adding user: %s', e)
        flash(f'User {e.user.username} was created, but assigning companies failed.', 'error')
    except BackendError as e:
        logger.error('Error adding user: %s', e)
        flash('Could not create the user.', 'error')
    else:
        flash(f'User {user.username} created.', 'success')

    return redirect(url_for('admin.users'))


@admin_bp.route('/users/<user_id>/delete', methods=['POST'])
@admin_required
def delete(user_id):
    """Deletes a user after removing its assignments."""
    try:
        delete_user(get_backend(), user_id)
    except BackendError as e:
        logger.error('Error deleting user: %s', e)
        flash('Could not delete the user.', 'error')
    else:
        flash('User deleted.', 'info')
    return redirect(url_for('admin.users'))


@admin_bp.route('/users/<user_id>/companies', methods=['POST'])
@admin_required
def assign(user_id):
    """Assigns one more company to a user."""
    company_id = request.form.get('company_id', type=int)
    if company_id is None:
        flash('Select a company to assign.', 'error')
        return redirect(url_for('admin.users'))

    try:
        assign_company(get_backend(), user_id, company_id)
    except BackendError as e:
        logger.error('Error assigning company: %s', e)
        flash('Could not assign the company.', 'error')
    else:
        flash('Company assigned.', 'success')
    return redirect(url_for('admin.users'))


@admin_bp.route('/users/<user_id>/companies/<int:company_id>/delete', methods=['POST'])
@admin_required
def unassign(user_id, company_id):
    """Removes a company assignment from a user."""
    try:
        unassign_company(get_backend(), user_id, company_id)
    except BackendError as e:
        logger.error('Error removing company: %s', e)
        flash('Could not remove the company.', 'error')
    else:
        flash('Company removed.', 'info')
    return redirect(url_for('admin.users'))
