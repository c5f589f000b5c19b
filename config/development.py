import os

from .config import Config, _flag

SECRET_KEY = Config.SECRET_KEY
JWT_SECRET_KEY = Config.JWT_SECRET_KEY
JWT_ACCESS_TOKEN_DAYS = Config.JWT_ACCESS_TOKEN_DAYS

DB_CONFIG = Config.db_config()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
CORS_ORIGINS = Config.CORS_ORIGINS

# Applies schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = _flag("AUTO_INIT_DB", "1")
# Also seeds the admin account
AUTO_SEED_DB = _flag("AUTO_SEED_DB", "1")

ADMIN_EMAIL = Config.ADMIN_EMAIL
ADMIN_PASSWORD = Config.ADMIN_PASSWORD
