"""
Recruit Portal - Database Initialization

Probes the backend tables and, when a probe fails, asks the backend to create
the table through its remote procedure. The companies table is seeded with
the fixed list below right after creation; users start empty.
"""

import logging

from app.models import Company, User
from app.services.supabase import BackendError

logger = logging.getLogger(__name__)


SEED_COMPANIES = [
    Company(
        id=None,
        name='Torkin Manes LLP',
        image='https://media.licdn.com/dms/image/v2/D5622AQHAkDlBaPaGOQ/feedshare-shrink_2048_1536/feedshare-shrink_2048_1536/0/1684941018254?e=2147483647&v=beta&t=9pA6_rS3hb_Ae2Rn655pO83DkPQF6AEBrob-bflFjCg',
        description=(
            'Torkin Manes LLP is a leading law firm where you will be hired to manage '
            'reception duties, greet clients, and maintain the organization of office '
            'spaces. In this role, you will be hired to answer the main switchboard and '
            'provide excellent customer service.'
        ),
        location='Toronto',
        working_hours='9:00 AM to 5:00 PM, Monday to Friday',
    ),
    Company(
        id=None,
        name='Medicentres Canada Inc',
        image='https://np.naukimg.com/cphoto/l4sFXqBsXnc4xYoO2O8LQoX5A4WlqVG8j6Hs5hczcqe+ZCY3HlMvVOHWwm4tWcieRn8/qiKUQ8l9WmuA8ozp9JKV4yBLXxcPmC3U9zBT7/jxvD6mcmnZYjVj7jMwDix5sF',
        description=(
            'Medicentres operates medical clinics across Canada, and you will be hired to '
            'greet patients, schedule appointments, and handle administrative tasks. In '
            'this position, you will be hired to interact with patients and ensure a '
            'smooth flow of operations within the clinic.'
        ),
        location='Ontario',
        working_hours='8:00 AM to 4:00 PM or 9:00 AM to 5:00 PM',
    ),
    Company(
        id=None,
        name='Brandt Group of Companies',
        image='https://www.brandt.ca/getmedia/d08a5445-9c3f-4e63-8f08-a4d6c4ad7bb5/Brandt-Rallies-Community-Show-They-Care-1140x720.jpg.aspx?width=1440&height=720&ext=.jpg',
        description=(
            'Brandt Group is a diverse company involved in various sectors including '
            'agriculture and construction. You will be hired to manage front desk '
            'operations, answer phones, and assist with administrative tasks within '
            'the office.'
        ),
        location='Regina, Saskatchewan',
        working_hours='8:00 AM to 5:00 PM, Monday to Friday',
    ),
]

# table -> remote procedure that creates it
TABLE_PROCEDURES = {
    Company.__tablename__: 'create_companies_table',
    User.__tablename__: 'create_users_table',
}


def _table_exists(backend, table):
    try:
        backend.select(table, limit=1)
        return True
    except BackendError as e:
        logger.info('Probe of %s failed (%s); treating table as missing', table, e)
        return False


class SeedError(BackendError):
    """One or more tables could not be created or seeded."""

    def __init__(self, created, failures):
        details = '; '.join(str(e) for e in failures)
        super().__init__(f'Database initialization incomplete: {details}')
        self.created = created
        self.failures = failures


def initialize_database(backend):
    """
    Creates missing tables and seeds the companies table.

    Each table is handled independently: a failure on one is logged and the
    next table is still probed. Not transactional: if the table creation
    succeeds and the seed insert fails, the next run finds an existing, empty
    companies table and does not seed it again.

    Returns:
        Names of the tables created during this run

    Raises:
        SeedError: after every table was attempted, if any step failed
    """
    created = []
    failures = []

    for table, procedure in TABLE_PROCEDURES.items():
        if _table_exists(backend, table):
            continue

        try:
            backend.rpc(procedure)
            created.append(table)
            logger.info('Created table %s via %s', table, procedure)

            if table == Company.__tablename__:
                backend.insert(table, [company.to_row() for company in SEED_COMPANIES])
                logger.info('Seeded %d companies', len(SEED_COMPANIES))
        except BackendError as e:
            logger.error('Initialization of %s failed: %s', table, e)
            failures.append(e)

    if failures:
        raise SeedError(created, failures)
    return created
