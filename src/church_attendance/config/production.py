import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "db"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "church_db"),
}

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")

PORT = int(os.getenv("PORT", "5000"))
DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:5000")

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
INSIGHT_TIMEOUT = float(os.getenv("INSIGHT_TIMEOUT", "15"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
# Demo accounts are still created on an empty users table.
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
