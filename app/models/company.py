"""
Recruit Portal - Company Model
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Company:
    """A company a candidate can be assigned to."""

    __tablename__ = 'companies'

    id: Optional[int]
    name: str
    description: str = ''
    location: str = ''
    image: str = ''
    working_hours: str = ''

    @classmethod
    def from_row(cls, row):
        """Builds a Company from a `companies` row."""
        return cls(
            id=row['id'],
            name=row['name'],
            description=row.get('description') or '',
            location=row.get('location') or '',
            image=row.get('image') or '',
            working_hours=row.get('working_hours') or '',
        )

    def to_row(self):
        """Row payload for insertion (the id is assigned by the backend)."""
        return {
            'name': self.name,
            'description': self.description,
            'location': self.location,
            'image': self.image,
            'working_hours': self.working_hours,
        }

    def __repr__(self):
        return f'<Company {self.name}>'
