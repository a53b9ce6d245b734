"""
database/supabase_store.py
--------------------------
Client for the hosted Supabase project that keeps the applicant list.

Only one operation is needed: insert a row through the PostgREST
endpoint (``POST {url}/rest/v1/{table}``). Rows are never read back.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from database.models import InsertResult

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    """Base error for the hosted record store client."""


class RecordStoreNetworkError(RecordStoreError):
    """The request never produced an HTTP response (DNS, TLS, connection reset...)."""


class SupabaseRecordStore:
    """
    Insert-only PostgREST client.

    Parameters
    ----------
    url : str
        Project URL, e.g. ``https://xyzcompany.supabase.co``.
    api_key : str
        Publishable (anon) key; sent both as ``apikey`` and as a bearer token.
    timeout : float, optional
        Seconds to wait for the store. None waits as long as the store takes.
    session : requests.Session, optional
        Shared HTTP session; one is created when omitted.
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=minimal",
        }

    def table_url(self, table: str) -> str:
        return f"{self.base_url}/rest/v1/{table}"

    def insert(self, table: str, record: dict[str, Any]) -> InsertResult:
        """
        Insert one row.

        A response outside 2xx is the store reporting an error and comes back
        as ``InsertResult(error=...)``. Transport failures raise
        ``RecordStoreNetworkError``.
        """
        try:
            resp = self.session.post(
                self.table_url(table),
                json=[record],
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RecordStoreNetworkError(f"Failed to reach record store: {e}") from e

        if 200 <= resp.status_code < 300:
            return InsertResult()

        return InsertResult(error=_error_message(resp), details=_error_body(resp))


def _error_body(resp: requests.Response) -> dict[str, Any]:
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _error_message(resp: requests.Response) -> str:
    """PostgREST puts the reason in ``message``; fall back to the status line."""
    body = _error_body(resp)
    message = body.get("message") or body.get("error") or resp.reason or "request failed"
    return f"HTTP {resp.status_code}: {message}"
