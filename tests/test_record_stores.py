"""
tests/test_record_stores.py
---------------------------
Tests for the two record stores behind ``insert(table, record)``:

* RegistrationDatabase: real SQLite file under pytest's tmp_path
* SupabaseRecordStore: the requests.Session is a MagicMock, so nothing
  leaves the machine

Run with:  pytest tests/test_record_stores.py -v
"""

import sqlite3
from unittest.mock import MagicMock

import pytest
import requests

from database.database import RegistrationDatabase
from database.models import InsertResult, RegistrationRecord
from database.supabase_store import RecordStoreNetworkError, SupabaseRecordStore
from mastermind.extensions import build_record_store
from mastermind.services.errors import RecordStoreConfigError

RECORD = RegistrationRecord("0b5f7e0e-6a43-4a4e-9d0e-3f1b2c4d5e6f", "Jane Doe", "jane@example.com")


def make_response(status_code, json_body=None, reason=""):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.reason = reason
    if json_body is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = json_body
    return resp


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

def test_record_to_row():
    assert RECORD.to_row() == {
        "user_id": "0b5f7e0e-6a43-4a4e-9d0e-3f1b2c4d5e6f",
        "name": "Jane Doe",
        "email": "jane@example.com",
    }


def test_insert_result_ok():
    assert InsertResult().ok
    assert not InsertResult(error="nope").ok


# ---------------------------------------------------------------------------
# SQLite
# ---------------------------------------------------------------------------

class TestRegistrationDatabase:

    def test_insert_creates_table_and_row(self, db):
        result = db.insert("Form_Applicants", RECORD.to_row())
        assert result.ok
        assert db.count("Form_Applicants") == 1
        assert db.all_user_ids("Form_Applicants") == [RECORD.user_id]

    def test_row_contents(self, db):
        db.insert("Form_Applicants", RECORD.to_row())
        with sqlite3.connect(db.db_path) as con:
            row = con.execute('SELECT user_id, name, email, created_at FROM "Form_Applicants"').fetchone()
        assert row[:3] == (RECORD.user_id, "Jane Doe", "jane@example.com")
        assert row[3] is not None

    def test_same_person_twice_makes_two_rows(self, db):
        db.insert("Form_Applicants", {"user_id": "a", "name": "Jane", "email": "j@x.io"})
        db.insert("Form_Applicants", {"user_id": "b", "name": "Jane", "email": "j@x.io"})
        assert db.all_user_ids("Form_Applicants") == ["a", "b"]

    def test_duplicate_id_is_reported_not_raised(self, db):
        db.insert("Form_Applicants", RECORD.to_row())
        result = db.insert("Form_Applicants", RECORD.to_row())
        assert not result.ok
        assert "UNIQUE" in result.error
        assert result.details["type"] == "IntegrityError"
        assert db.count("Form_Applicants") == 1

    def test_insert_twice_on_configured_path(self, db):
        db.insert("Form_Applicants", {"user_id": "a", "name": "Jane", "email": "j@x.io"})
        db.insert("Form_Applicants", {"user_id": "b", "name": "Jane", "email": "j@x.io"})
        assert db.count("Form_Applicants") == 2

    def test_in_memory_database_keeps_rows_between_calls(self):
        mem = RegistrationDatabase(":memory:")
        assert mem.insert("Form_Applicants", {"user_id": "a", "name": "Jane", "email": "j@x.io"}).ok
        assert mem.insert("Form_Applicants", {"user_id": "b", "name": "Jane", "email": "j@x.io"}).ok
        assert mem.count("Form_Applicants") == 2
        assert mem.all_user_ids("Form_Applicants") == ["a", "b"]
        mem.close()

    def test_table_recreated_after_file_removed(self, db, tmp_path):
        assert db.insert("Form_Applicants", {"user_id": "a", "name": "Jane", "email": "j@x.io"}).ok
        (tmp_path / "registrations.db").unlink()
        result = db.insert("Form_Applicants", {"user_id": "b", "name": "Jane", "email": "j@x.io"})
        assert result.ok
        assert db.all_user_ids("Form_Applicants") == ["b"]

    @pytest.mark.parametrize("table", ["", "Form Applicants", 'x"; DROP TABLE y; --', "1abc"])
    def test_rejects_bad_table_names(self, db, table):
        with pytest.raises(ValueError, match="Invalid table name"):
            db.insert(table, RECORD.to_row())


# ---------------------------------------------------------------------------
# Supabase
# ---------------------------------------------------------------------------

class TestSupabaseRecordStore:

    def make_store(self, response=None, exc=None, timeout=None):
        session = MagicMock(spec=requests.Session)
        if exc is not None:
            session.post.side_effect = exc
        else:
            session.post.return_value = response
        store = SupabaseRecordStore("https://demo.supabase.co/", "anon-key", timeout=timeout, session=session)
        return store, session

    def test_posts_one_row_to_rest_endpoint(self):
        store, session = self.make_store(make_response(201))

        result = store.insert("Form_Applicants", RECORD.to_row())

        assert result.ok
        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args[0] == "https://demo.supabase.co/rest/v1/Form_Applicants"
        assert kwargs["json"] == [RECORD.to_row()]
        assert kwargs["headers"]["apikey"] == "anon-key"
        assert kwargs["headers"]["Authorization"] == "Bearer anon-key"
        assert kwargs["headers"]["Prefer"] == "return=minimal"
        assert kwargs["timeout"] is None

    def test_passes_configured_timeout(self):
        store, session = self.make_store(make_response(201), timeout=2.5)
        store.insert("Form_Applicants", RECORD.to_row())
        assert session.post.call_args.kwargs["timeout"] == 2.5

    def test_store_error_message_from_body(self):
        body = {"code": "42501", "message": "new row violates row-level security policy"}
        store, _ = self.make_store(make_response(401, body, reason="Unauthorized"))

        result = store.insert("Form_Applicants", RECORD.to_row())

        assert not result.ok
        assert result.error == "HTTP 401: new row violates row-level security policy"
        assert result.details["code"] == "42501"

    def test_store_error_without_json_body(self):
        store, _ = self.make_store(make_response(503, reason="Service Unavailable"))
        result = store.insert("Form_Applicants", RECORD.to_row())
        assert result.error == "HTTP 503: Service Unavailable"
        assert result.details == {}

    def test_transport_failure_raises(self):
        store, _ = self.make_store(exc=requests.ConnectionError("dns failure"))
        with pytest.raises(RecordStoreNetworkError, match="dns failure"):
            store.insert("Form_Applicants", RECORD.to_row())


# ---------------------------------------------------------------------------
# Store selection
# ---------------------------------------------------------------------------

class TestBuildRecordStore:

    def test_supabase(self):
        store = build_record_store({
            "RECORD_STORE": "supabase",
            "SUPABASE_URL": "https://demo.supabase.co",
            "SUPABASE_KEY": "k",
            "SUPABASE_TIMEOUT": None,
        })
        assert isinstance(store, SupabaseRecordStore)
        assert store.table_url("T") == "https://demo.supabase.co/rest/v1/T"

    def test_supabase_requires_credentials(self):
        with pytest.raises(RecordStoreConfigError):
            build_record_store({"RECORD_STORE": "supabase", "SUPABASE_URL": "", "SUPABASE_KEY": ""})

    def test_sqlite(self, tmp_path):
        store = build_record_store({"RECORD_STORE": "sqlite", "SQLITE_PATH": str(tmp_path / "r.db")})
        assert isinstance(store, RegistrationDatabase)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown RECORD_STORE"):
            build_record_store({"RECORD_STORE": "mongo"})
