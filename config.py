from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parent
INSTANCE_DIR = BASE_DIR / "instance"
DB_FILE = INSTANCE_DIR / "app.db"


def _get_database_uri() -> str:
    url = os.environ.get("DATABASE_URL")
    if url:
        return url
    INSTANCE_DIR.mkdir(exist_ok=True)
    return f"sqlite:///{DB_FILE.as_posix()}"


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-change-me")
    SQLALCHEMY_DATABASE_URI = _get_database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # JSON API, no browser forms
    WTF_CSRF_ENABLED = False
    PETS_API_URL = os.environ.get("PETS_API_URL", "http://localhost:3000")
    PETS_API_TIMEOUT = float(os.environ.get("PETS_API_TIMEOUT", "10"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
