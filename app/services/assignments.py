"""
Recruit Portal - Users and Company Assignments

Data access for the candidate opportunity list and the admin panel. Each
function issues its requests sequentially; multi-step operations are not
transactional and leave partial state behind when a later step fails.
"""

import logging
from typing import Iterable, List

from app.models import Assignment, Company, User
from app.services.supabase import BackendError

logger = logging.getLogger(__name__)

# Embedded relation used by the admin listing: users -> user_companies -> companies
USER_WITH_COMPANIES = '*, user_companies(company_id, companies(*))'


class AssignmentError(Exception):
    """The user was created but its company assignments could not be stored."""

    def __init__(self, user, cause):
        super().__init__(f'User {user.username} created without assignments: {cause}')
        self.user = user
        self.cause = cause


def companies_for_user(backend, user_id) -> List[Company]:
    """
    Resolves the companies assigned to ``user_id``.

    Two round trips: the assignment rows first, then the companies whose id
    is among them. Company order is whatever the backend returns.
    """
    links = backend.select(
        Assignment.__tablename__,
        columns='company_id',
        eq={'user_id': user_id},
    )
    company_ids = list(dict.fromkeys(link['company_id'] for link in links))
    if not company_ids:
        return []

    rows = backend.select(Company.__tablename__, in_={'id': company_ids})
    return [Company.from_row(row) for row in rows]


def list_companies(backend) -> List[Company]:
    """All companies, ordered by name."""
    rows = backend.select(Company.__tablename__, order='name')
    return [Company.from_row(row) for row in rows]


def list_users(backend) -> List[User]:
    """All users with their assigned companies, fetched in a single request."""
    rows = backend.select(User.__tablename__, columns=USER_WITH_COMPANIES)
    return [User.from_row(row) for row in rows]


def create_user(backend, username, password, email, full_name,
                company_ids: Iterable[int] = ()) -> User:
    """
    Inserts a user and one assignment per selected company.

    Raises:
        BackendError: the user row could not be inserted
        AssignmentError: the user exists but its assignments failed
    """
    rows = backend.insert(User.__tablename__, {
        'username': username,
        'password': password,
        'email': email,
        'full_name': full_name,
    })
    if not rows:
        raise BackendError('Insert returned no row', 'insert', User.__tablename__)
    user = User.from_row(rows[0])

    company_ids = list(company_ids)
    if company_ids:
        links = [Assignment(user_id=user.id, company_id=company_id).to_row()
                 for company_id in company_ids]
        try:
            backend.insert(Assignment.__tablename__, links)
        except BackendError as e:
            raise AssignmentError(user, e) from e

    logger.info('Created user %s with %d companies', user.username, len(company_ids))
    return user


def delete_user(backend, user_id):
    """
    Deletes the user's assignments, then the user.

    If the second step fails the user survives without assignments.
    """
    backend.delete(Assignment.__tablename__, eq={'user_id': user_id})
    backend.delete(User.__tablename__, eq={'id': user_id})
    logger.info('Deleted user %s', user_id)


def assign_company(backend, user_id, company_id) -> Assignment:
    """Adds a single assignment. Duplicate pairs are not checked."""
    assignment = Assignment(user_id=user_id, company_id=company_id)
    backend.insert(Assignment.__tablename__, assignment.to_row())
    return assignment


def unassign_company(backend, user_id, company_id):
    """Removes every assignment row for the (user, company) pair."""
    backend.delete(Assignment.__tablename__, eq={'user_id': user_id, 'company_id': company_id})
