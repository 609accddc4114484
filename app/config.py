from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./study_organizer.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# "sql" or "memory"
TASK_STORE = os.getenv("TASK_STORE", "sql").lower()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

_cors_origins = os.getenv("CORS_ORIGINS", "*")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]
