import logging

from flask import current_app
from flask_cors import CORS
from flask_session import Session

from database.database import RegistrationDatabase
from database.supabase_store import SupabaseRecordStore
from mastermind.services.errors import RecordStoreConfigError

logger = logging.getLogger(__name__)

cors = CORS()
sess = Session()

RECORD_STORE_KEY = "record_store"


def build_record_store(config):
    """Create the record store named by ``RECORD_STORE``."""
    kind = config.get("RECORD_STORE", "supabase")
    if kind == "supabase":
        url, key = config.get("SUPABASE_URL"), config.get("SUPABASE_KEY")
        if not url or not key:
            raise RecordStoreConfigError("SUPABASE_URL and SUPABASE_KEY must be set for the supabase record store")
        return SupabaseRecordStore(url, key, timeout=config.get("SUPABASE_TIMEOUT"))
    if kind == "sqlite":
        return RegistrationDatabase(config.get("SQLITE_PATH", "registrations.db"))
    raise ValueError(f"Unknown RECORD_STORE: {kind!r}")


def init_record_store(app, store=None):
    app.extensions[RECORD_STORE_KEY] = store if store is not None else build_record_store(app.config)
    logger.info("Record store ready: %s", type(app.extensions[RECORD_STORE_KEY]).__name__)


def get_record_store():
    return current_app.extensions[RECORD_STORE_KEY]
