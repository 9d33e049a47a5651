# backend/laundry/config.py
from __future__ import annotations
import os


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    # Optional "SECRET_KEY", with default dev key
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # SQLite DB stored in backend/instance/laundry.sqlite3
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", #optional alternative location
        "sqlite:///laundry.sqlite3", #default local location
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # "sql" keeps collections in storage_entries, "memory" keeps them in-process
    STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "sql")

    # Write default users/outlets/products on startup when their keys are absent
    SEED_ON_STARTUP = _env_flag("SEED_ON_STARTUP")

    SESSION_TIMEOUT_HOURS = int(os.environ.get("SESSION_TIMEOUT_HOURS", "24"))

    LAUNDRY_CODE_PREFIX = os.environ.get("LAUNDRY_CODE_PREFIX", "LD")
