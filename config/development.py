import os

from config.config import LOG_LEVEL, PASSWORD_MIN_LENGTH, QR_BORDER, QR_BOX_SIZE, _flag, db_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env(default_password="root")

DEBUG = True

# If enabled, app applies database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = _flag("AUTO_INIT_DB", "1")
# Optional: also create the demo admin and riders
AUTO_SEED_DB = _flag("AUTO_SEED_DB", "0")
