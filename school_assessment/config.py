import os
from pathlib import Path

from dotenv import load_dotenv

# .env beside the package, so launching from another directory still picks it up
load_dotenv(Path(__file__).with_name(".env"))


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


DATABASE_URL = os.getenv("DATABASE_URL", "").strip()
if not DATABASE_URL:
    DATABASE_URL = f"sqlite:///{Path(__file__).with_name('app.db')}"

JWT_SECRET = os.getenv("JWT_SECRET", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))

API_PREFIX = os.getenv("API_PREFIX", "/api")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
ENABLE_TEST_ROUTES = _env_bool("ENABLE_TEST_ROUTES", False)

SEED_ADMIN_EMAIL = os.getenv("SEED_ADMIN_EMAIL")
SEED_ADMIN_PASSWORD = os.getenv("SEED_ADMIN_PASSWORD")
SEED_ADMIN_NAME = os.getenv("SEED_ADMIN_NAME", "Administrator")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
