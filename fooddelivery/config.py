import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "mysql+pymysql://root:@127.0.0.1:3306/e-system-delivery?charset=utf8mb4"
DEFAULT_CORS_ORIGIN = "http://localhost:4200"


def safe_getenv(key, default=None):
    if os.path.exists(".env"): load_dotenv(".env")
    return os.getenv(key, default)


def _as_bool(value, default=True):
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _load_db_url_from_file(repo_root: Optional[Path] = None) -> Optional[str]:
    """Try to read the DB URL from data/db_link if present."""
    root = repo_root or Path.cwd()
    link_file = root / "data" / "db_link"
    if link_file.exists():
        url = link_file.read_text(encoding="utf-8").strip()
        return url or None
    return None


def load_db_url(repo_root: Optional[Path] = None) -> str:
    """DATABASE_URL, then SQLALCHEMY_DATABASE_URI, then data/db_link, then local MySQL."""
    return (
        safe_getenv("DATABASE_URL")
        or safe_getenv("SQLALCHEMY_DATABASE_URI")
        or _load_db_url_from_file(repo_root)
        or DEFAULT_DATABASE_URL
    )


def load_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    config: Dict[str, Any] = {
        "SECRET_KEY": safe_getenv("SECRET_KEY", "dev"),
        "SQLALCHEMY_DATABASE_URI": load_db_url(),
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "SQLALCHEMY_ENGINE_OPTIONS": {"pool_pre_ping": True},
        "CORS_ORIGIN": safe_getenv("CORS_ORIGIN") or safe_getenv("FRONTEND_URL") or DEFAULT_CORS_ORIGIN,
        "LOG_LEVEL": safe_getenv("LOG_LEVEL", "INFO").upper(),
        "CREATE_TABLES": _as_bool(safe_getenv("CREATE_TABLES")),
    }
    if overrides:
        config.update(overrides)
    config["CREATE_TABLES"] = _as_bool(config.get("CREATE_TABLES"))
    return config
