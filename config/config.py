"""Raw values only; ReportSettings.from_module converts and validates them."""
import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": os.getenv("DB_PORT", "3306"),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timesheet_reports"),
}

# Object storage (Supabase storage REST API)
STORAGE_URL = os.getenv("STORAGE_URL", os.getenv("SUPABASE_URL", ""))
STORAGE_KEY = os.getenv("STORAGE_KEY", os.getenv("SUPABASE_SERVICE_KEY", ""))
STORAGE_BUCKET = os.getenv("STORAGE_BUCKET", "berichte")
HTTP_TIMEOUT_SECONDS = os.getenv("HTTP_TIMEOUT_SECONDS", "30")

TEMPLATE_PATH = os.getenv("TEMPLATE_PATH", "templates/report-template.html")
LOGO_PATH = os.getenv("LOGO_PATH", "templates/logo.png")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("LOG_JSON", "0")
