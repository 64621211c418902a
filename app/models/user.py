"""
Recruit Portal - User Model
"""

from dataclasses import dataclass, field
from typing import List

from flask_login import UserMixin

from app.models.company import Company


@dataclass(eq=False)
class User(UserMixin):
    """Candidate account stored in the `users` table."""

    __tablename__ = 'users'

    id: str
    username: str
    password: str = ''
    email: str = ''
    full_name: str = ''
    companies: List[Company] = field(default_factory=list)

    @classmethod
    def from_row(cls, row):
        """
        Builds a User from a `users` row.

        When the row carries the embedded relation
        ``user_companies(company_id, companies(*))`` the nested payload is
        flattened into ``companies``. Assignments whose company could not be
        resolved are skipped.
        """
        companies = []
        for link in row.get('user_companies') or []:
            company_row = link.get('companies')
            if company_row:
                companies.append(Company.from_row(company_row))

        return cls(
            id=str(row['id']),
            username=row['username'],
            password=row.get('password') or '',
            email=row.get('email') or '',
            full_name=row.get('full_name') or '',
            companies=companies,
        )

    @property
    def display_name(self):
        return self.full_name or self.username

    def __repr__(self):
        return f'<User {self.username}>'
