"""Settings shared by every environment, read from the process environment."""

import os


def _flag(name: str, default: str) -> bool:
    return bool(int(os.getenv(name, default)))


def db_config_from_env(*, default_password: str = "", default_database: str = "bus_attendance") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", default_database),
    }


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# QR image rendering
QR_BOX_SIZE = int(os.getenv("QR_BOX_SIZE", "10"))
QR_BORDER = int(os.getenv("QR_BORDER", "2"))

PASSWORD_MIN_LENGTH = int(os.getenv("PASSWORD_MIN_LENGTH", "4"))
