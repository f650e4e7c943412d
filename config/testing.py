from config.config import QR_BORDER, QR_BOX_SIZE, db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_database="bus_attendance_test")

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"

PASSWORD_MIN_LENGTH = 4

# Tests wire in-memory repositories; never touch a real database on startup.
AUTO_INIT_DB = False
AUTO_SEED_DB = False
