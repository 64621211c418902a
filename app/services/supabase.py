"""
Supabase backend gateway.

Wraps the supabase-py client behind the handful of table operations the
application uses: select (with equality, ``in``, order and limit filters),
insert, delete and remote procedure calls. Every failure, whether raised by
PostgREST, by the HTTP transport or by missing configuration, surfaces as
``BackendError`` so callers deal with a single exception type.
"""
from typing import Any, Dict, Iterable, List, Optional
import logging

import httpx
from postgrest.exceptions import APIError
from supabase import create_client, Client

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """A backend request failed or could not be issued."""

    def __init__(self, message: str, operation: Optional[str] = None, table: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.table = table

    def __str__(self):
        if self.operation and self.table:
            return f'{self.operation} on {self.table}: {self.message}'
        return self.message


class SupabaseBackend:
    """
    Table-scoped access to the hosted Supabase database.

    Follows the Flask extension pattern: construct once, bind with
    ``init_app``. The bound instance is stored in ``app.extensions['backend']``.
    """

    def __init__(self, app=None, client: Optional[Client] = None):
        self.client = client
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        if self.client is None:
            url = app.config.get('SUPABASE_URL')
            key = app.config.get('SUPABASE_KEY')
            if not url or not key:
                logger.warning('Supabase configuration incomplete - missing URL or key')
            else:
                try:
                    self.client = create_client(url, key)
                    logger.debug('Supabase client created for %s', url)
                except Exception as e:
                    logger.error('Failed to create Supabase client: %s', e)
        app.extensions['backend'] = self

    def _require_client(self, operation, table):
        if self.client is None:
            raise BackendError('Supabase client is not configured', operation, table)
        return self.client

    def _execute(self, query, operation, table):
        try:
            return query.execute()
        except APIError as e:
            raise BackendError(e.message or str(e), operation, table) from e
        except httpx.HTTPError as e:
            raise BackendError(str(e), operation, table) from e

    def select(
        self,
        table: str,
        columns: str = '*',
        eq: Optional[Dict[str, Any]] = None,
        in_: Optional[Dict[str, Iterable[Any]]] = None,
        order: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Fetch rows from ``table``.

        Args:
            columns: PostgREST column list, embedded relations included
                (e.g. ``'*, user_companies(company_id)'``)
            eq: column -> value equality filters, all of which must hold
            in_: column -> values membership filters
            order: column to sort ascending by
            limit: maximum number of rows

        Returns:
            List of row dictionaries in backend order
        """
        query = self._require_client('select', table).table(table).select(columns)
        for column, value in (eq or {}).items():
            query = query.eq(column, value)
        for column, values in (in_ or {}).items():
            query = query.in_(column, list(values))
        if order:
            query = query.order(order)
        if limit is not None:
            query = query.limit(limit)
        response = self._execute(query, 'select', table)
        return response.data or []

    def insert(self, table: str, rows) -> List[Dict[str, Any]]:
        """Insert one row (dict) or a batch (list of dicts); returns the stored rows."""
        client = self._require_client('insert', table)
        response = self._execute(client.table(table).insert(rows), 'insert', table)
        return response.data or []

    def delete(self, table: str, eq: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Delete the rows matching every equality filter in ``eq``."""
        if not eq:
            raise BackendError('Refusing to delete without a filter', 'delete', table)
        query = self._require_client('delete', table).table(table).delete()
        for column, value in eq.items():
            query = query.eq(column, value)
        response = self._execute(query, 'delete', table)
        return response.data or []

    def rpc(self, name: str, params: Optional[Dict[str, Any]] = None):
        """Call a remote procedure and return its payload."""
        client = self._require_client('rpc', name)
        response = self._execute(client.rpc(name, params or {}), 'rpc', name)
        return response.data
