"""
Recruit Portal - Authentication Routes
"""

import logging

from flask import Blueprint, render_template, request, redirect, url_for, flash, session
from flask_login import login_user, logout_user, login_required, current_user
from app.extensions import get_backend
from app.services.auth import authenticate, InvalidCredentials
from app.services.join_flow import JoinFlow
from app.services.supabase import BackendError

auth_bp = Blueprint('auth', __name__)
logger = logging.getLogger(__name__)

LOGIN_ERROR = 'Invalid username or password'


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Candidate login page."""
    if current_user.is_authenticated:
        return redirect(url_for('main.opportunities'))

    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')

        if not username or not password:
            return render_template('login.html', error=LOGIN_ERROR, username=username), 400

        try:
            user = authenticate(get_backend(), username, password)
        except InvalidCredentials:
            return render_template('login.html', error=LOGIN_ERROR, username=username), 401
        except BackendError as e:
            logger.error('Error logging in: %s', e)
            return render_template('login.html', error=LOGIN_ERROR, username=username), 401

        login_user(user)
        flash(f'Welcome, {user.display_name}!', 'success')
        return redirect(url_for('main.opportunities'))

    return render_template('login.html')


@auth_bp.route('/logout')
@login_required
def logout():
    """Ends the candidate session."""
    logout_user()
    JoinFlow.clear(session)
    flash('You have been logged out.', 'info')
    return redirect(url_for('main.opportunities'))


@auth_bp.route('/')
def index():
    return redirect(url_for('main.opportunities'))
