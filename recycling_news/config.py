"""Environment-driven configuration for AutoRecyclingNews."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

NAME_APP = os.getenv("NAME_APP", "AutoRecyclingNews")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))

PATH_DATABASE = os.getenv("PATH_DATABASE", "./data")
NAME_DB = os.getenv("NAME_DB", "blog.db")
PATH_UPLOADS = os.getenv("PATH_UPLOADS", "./uploads")

LOG_FILE = os.getenv("LOG_FILE", "auto_recycling_news.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

API_BASE_URL = os.getenv("API_BASE_URL", f"http://localhost:{PORT}")


def default_database_url() -> str:
    """
    Build the SQLite URL from PATH_DATABASE and NAME_DB.

    The database directory is created if it does not exist yet.
    """
    db_dir = Path(PATH_DATABASE)
    db_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_dir / NAME_DB}"
