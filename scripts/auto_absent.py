"""Daily sweep for cron when the Flask CLI is not available.

Example crontab entry (23:55 every day)::

    55 23 * * * cd /srv/bus-attendance && APP_ENV=production python scripts/auto_absent.py
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.bus_attendance.bus_attendance.container import build_container


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(db_config=dict(settings.DB_CONFIG))
    result = container.attendance_service.auto_absent()
    print(f"OK: checked={result.checked} marked_absent={result.marked_absent}")


if __name__ == "__main__":
    main()
