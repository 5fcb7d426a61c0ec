import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "dayflow_hrms_test"),
    "pool_size": 2,
    "acquire_timeout": 5.0,
}

PORT = 5000

CORS_ORIGINS = ["*"]

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
