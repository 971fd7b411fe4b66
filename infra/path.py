# infra/path.py
from __future__ import annotations
import os
import sys
from pathlib import Path

APP_NAME = "AgencyFinanceEngine"
COMPANY_NAME = "AgencyOps"
DATA_DIR_ENV = "AF_DATA_DIR"


def user_data_dir() -> Path:
    """
    Per-user data directory holding the database and logs.

    AF_DATA_DIR wins when set. Otherwise:

    Windows:
        C:\\Users\\<User>\\AppData\\Roaming\\AgencyOps\\AgencyFinanceEngine

    macOS:
        ~/Library/Application Support/AgencyOps/AgencyFinanceEngine

    Linux:
        ~/.local/share/AgencyOps/AgencyFinanceEngine
    """
    override = (os.getenv(DATA_DIR_ENV) or "").strip()
    try:
        if override:
            path = Path(override).expanduser()
        else:
            if sys.platform.startswith("win"):
                base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
            elif sys.platform == "darwin":
                base = Path.home() / "Library" / "Application Support"
            else:
                base = Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))
            path = base / COMPANY_NAME / APP_NAME
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError:
        fallback = Path.home() / f".{APP_NAME}"
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def default_db_path() -> Path:
    return user_data_dir() / "agency_finance.db"


__all__ = ["APP_NAME", "DATA_DIR_ENV", "default_db_path", "user_data_dir"]
