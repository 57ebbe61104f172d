SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "church_db_test",
}

STORE_BACKEND = "memory"

PORT = 5000
DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

PUBLIC_BASE_URL = "http://testserver"

GEMINI_API_KEY = None
GEMINI_MODEL = "gemini-2.5-flash"
INSIGHT_TIMEOUT = 1.0

AUTO_INIT_DB = False
AUTO_SEED_DB = True
