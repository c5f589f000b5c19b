import os

from .config import Config, _flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
JWT_ACCESS_TOKEN_DAYS = Config.JWT_ACCESS_TOKEN_DAYS

DB_CONFIG = Config.db_config()

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
CORS_ORIGINS = Config.CORS_ORIGINS

AUTO_INIT_DB = _flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = _flag("AUTO_SEED_DB", "0")

ADMIN_EMAIL = Config.ADMIN_EMAIL
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "")
