from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./todo.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SEED_DATABASE = _env_flag("SEED_DATABASE", "true")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5280"))
RELOAD = _env_flag("RELOAD", "false")

_cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:5173")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]
