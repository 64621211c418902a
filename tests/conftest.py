"""
Shared fixtures: an in-memory backend double and a Flask app bound to it.
"""

import itertools
import uuid

import pytest

from app import create_app
from app.services.supabase import BackendError


def _parse_columns(columns):
    """Splits a PostgREST column list into (name, nested columns or None) pairs."""
    items, depth, buf = [], 0, ''
    for ch in columns:
        if ch == ',' and depth == 0:
            items.append(buf.strip())
            buf = ''
            continue
        if ch == '(':
            depth += 1
        elif ch == ')':
            depth -= 1
        buf += ch
    if buf.strip():
        items.append(buf.strip())

    parsed = []
    for item in items:
        if '(' in item:
            name, inner = item.split('(', 1)
            parsed.append((name.strip(), _parse_columns(inner[:-1])))
        else:
            parsed.append((item, None))
    return parsed


def _matches(row, eq, in_):
    for column, value in (eq or {}).items():
        if row.get(column) != value:
            return False
    for column, values in (in_ or {}).items():
        if row.get(column) not in list(values):
            return False
    return True


class FakeBackend:
    """
    In-memory stand-in for SupabaseBackend.

    Missing tables make every operation on them fail, like an uninitialized
    project. ``fail(operation, table)`` injects a failure for one operation.
    """

    # (table, embedded table) -> (local column, remote column, one-to-many)
    RELATIONS = {
        ('users', 'user_companies'): ('id', 'user_id', True),
        ('user_companies', 'companies'): ('company_id', 'id', False),
    }
    PROCEDURES = {
        'create_companies_table': 'companies',
        'create_users_table': 'users',
    }

    def __init__(self, tables=('users', 'companies', 'user_companies')):
        self.tables = {name: [] for name in tables}
        self.calls = []
        self.failures = set()
        self._serial = itertools.count(1)

    def fail(self, operation, table):
        self.failures.add((operation, table))

    def _check(self, operation, table):
        self.calls.append((operation, table))
        if (operation, table) in self.failures:
            raise BackendError('injected failure', operation, table)
        if operation != 'rpc' and table not in self.tables:
            raise BackendError(f'relation "public.{table}" does not exist', operation, table)

    def _project(self, table, row, shape):
        out = {}
        for name, nested in shape:
            if nested is None:
                if name == '*':
                    out.update(row)
                else:
                    out[name] = row.get(name)
                continue
            local, remote, many = self.RELATIONS[(table, name)]
            related = [self._project(name, r, nested)
                       for r in self.tables.get(name, [])
                       if r.get(remote) == row.get(local)]
            out[name] = related if many else (related[0] if related else None)
        return out

    def select(self, table, columns='*', eq=None, in_=None, order=None, limit=None):
        self._check('select', table)
        rows = [row for row in self.tables[table] if _matches(row, eq, in_)]
        if order:
            rows = sorted(rows, key=lambda row: row[order])
        if limit is not None:
            rows = rows[:limit]
        shape = _parse_columns(columns)
        return [self._project(table, row, shape) for row in rows]

    def insert(self, table, rows):
        self._check('insert', table)
        batch = [rows] if isinstance(rows, dict) else list(rows)
        stored = []
        for row in batch:
            row = dict(row)
            if 'id' not in row:
                row['id'] = str(uuid.uuid4()) if table == 'users' else next(self._serial)
            self.tables[table].append(row)
            stored.append(dict(row))
        return stored

    def delete(self, table, eq):
        self._check('delete', table)
        removed = [row for row in self.tables[table] if _matches(row, eq, None)]
        self.tables[table] = [row for row in self.tables[table] if not _matches(row, eq, None)]
        return removed

    def rpc(self, name, params=None):
        self._check('rpc', name)
        if name not in self.PROCEDURES:
            raise BackendError(f'function {name} does not exist', 'rpc', name)
        self.tables.setdefault(self.PROCEDURES[name], [])
        return None

    def count(self, table, operation=None):
        if operation is None:
            return len(self.tables.get(table, []))
        return sum(1 for call in self.calls if call == (operation, table))


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def companies(backend):
    return backend.insert('companies', [
        {'name': 'Torkin Manes LLP', 'location': 'Toronto', 'description': 'Law firm',
         'image': 'https://example.com/torkin.jpg', 'working_hours': '9 to 5'},
        {'name': 'Medicentres Canada Inc', 'location': 'Ontario', 'description': 'Clinics',
         'image': 'https://example.com/medicentres.jpg', 'working_hours': '8 to 4'},
        {'name': 'Brandt Group of Companies', 'location': 'Regina, Saskatchewan',
         'description': 'Agriculture', 'image': '', 'working_hours': '8 to 5'},
    ])


@pytest.fixture
def candidate(backend):
    return backend.insert('users', {
        'username': 'jane',
        'password': 'secret',
        'email': 'jane@example.com',
        'full_name': 'Jane Doe',
    })[0]


@pytest.fixture
def app(backend):
    app = create_app('testing', backend=backend)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in(client, candidate):
    response = client.post('/login', data={'username': 'jane', 'password': 'secret'})
    assert response.status_code == 302
    return client


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess['is_admin'] = True
    return client
