"""
Recruit Portal - Data Models
"""

from app.models.user import User
from app.models.company import Company
from app.models.assignment import Assignment

__all__ = ['User', 'Company', 'Assignment']
