from .config import Config

SECRET_KEY = "test-secret"
JWT_SECRET_KEY = "test-jwt-secret-with-enough-length"
JWT_ACCESS_TOKEN_DAYS = 7

DB_CONFIG = Config.db_config()

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
CORS_ORIGINS = "*"

AUTO_INIT_DB = False
AUTO_SEED_DB = False

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "Admin1234"
