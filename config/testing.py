import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", "root"),
    "database": os.getenv("DB_NAME", "leave_analyzer_test"),
}

PORT = int(os.getenv("PORT", "3000"))
DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

MAX_CONTENT_LENGTH = 1024 * 1024

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
