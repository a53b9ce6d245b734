import os

from dotenv import load_dotenv

load_dotenv()


def _optional_float(name):
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


class Config:
    """Application configuration, read once from the environment (.env supported)."""

    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

    # Record store: "supabase" (hosted) or "sqlite" (local development)
    RECORD_STORE = os.getenv("RECORD_STORE", "supabase").strip().lower()
    REGISTRATION_TABLE = os.getenv("REGISTRATION_TABLE", "Form_Applicants")
    SUPABASE_URL = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
    SUPABASE_TIMEOUT = _optional_float("SUPABASE_TIMEOUT")
    SQLITE_PATH = os.getenv("SQLITE_PATH", "registrations.db")

    # Server-side sessions (Flask-Session); empty means signed cookie sessions
    SESSION_TYPE = os.getenv("SESSION_TYPE", "filesystem") or None
    SESSION_PERMANENT = False

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    RECORD_STORE = "sqlite"
    SQLITE_PATH = ":memory:"
    SESSION_TYPE = None
