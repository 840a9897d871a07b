import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "weekly_shifts"),
}

# Single-user app: every history row belongs to this owner
HISTORY_OWNER_ID = os.getenv("HISTORY_OWNER_ID", "default-user")

# Labels for weekday/month names ("it" or "en")
DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "it")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
