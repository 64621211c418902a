"""
Recruit Portal - Routes Package
"""

from app.routes.auth import auth_bp
from app.routes.main import main_bp
from app.routes.join import join_bp
from app.routes.admin import admin_bp

__all__ = ['auth_bp', 'main_bp', 'join_bp', 'admin_bp']
