"""
Recruit Portal - Flask Extensions
"""

from flask import current_app
from flask_login import LoginManager
from app.services.supabase import SupabaseBackend

# Extension instances
backend = SupabaseBackend()
login_manager = LoginManager()

# Login Manager settings
login_manager.login_view = 'auth.login'
login_manager.login_message = 'Please log in to view your opportunities.'
login_manager.login_message_category = 'warning'


def get_backend():
    """Backend bound to the current application."""
    return current_app.extensions['backend']
