"""
Recruit Portal - Authentication Service
"""

import logging
from typing import Optional

from app.models import User

logger = logging.getLogger(__name__)


class InvalidCredentials(Exception):
    """The username/password pair did not match exactly one user."""


def authenticate(backend, username: str, password: str) -> User:
    """
    Looks up the user whose username and password both match.

    Passwords are stored and compared as plain text.

    Raises:
        InvalidCredentials: no user, or more than one user, matched
        BackendError: the lookup itself failed
    """
    rows = backend.select(
        User.__tablename__,
        eq={'username': username, 'password': password},
    )
    if len(rows) != 1:
        logger.warning('Login rejected for %r (%d matching rows)', username, len(rows))
        raise InvalidCredentials(username)
    return User.from_row(rows[0])


def get_user(backend, user_id: str) -> Optional[User]:
    """Returns the user with ``user_id`` or None when it does not exist."""
    rows = backend.select(User.__tablename__, eq={'id': user_id}, limit=1)
    if not rows:
        return None
    return User.from_row(rows[0])


def check_admin_credentials(config, username: str, password: str) -> bool:
    """
    Validates the admin panel credentials configured in the environment.

    An empty configured password never matches.
    """
    expected = config.get('ADMIN_PASSWORD', '')
    return bool(expected) and username == config.get('ADMIN_USERNAME') and password == expected
