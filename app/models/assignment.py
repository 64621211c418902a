"""
Recruit Portal - User-Company Assignment Model
"""

from dataclasses import dataclass


@dataclass
class Assignment:
    """Join row linking a user to a company they may apply to."""

    __tablename__ = 'user_companies'

    user_id: str
    company_id: int

    @classmethod
    def from_row(cls, row):
        return cls(user_id=row['user_id'], company_id=row['company_id'])

    def to_row(self):
        return {'user_id': self.user_id, 'company_id': self.company_id}

    def __repr__(self):
        return f'<Assignment {self.user_id}-{self.company_id}>'
