from .config import *  # noqa: F401,F403

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "timesheet_reports_test",
}

STORAGE_URL = "http://localhost:54321"
STORAGE_KEY = "test-service-key"
STORAGE_BUCKET = "berichte-test"

LOG_LEVEL = "WARNING"
