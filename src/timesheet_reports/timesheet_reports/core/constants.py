"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_BUCKET = "berichte"
DEFAULT_TEMPLATE_PATH = "templates/report-template.html"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30

# Months looked back for a client that has never been shipped a report.
FIRST_REPORT_LOOKBACK_MONTHS = 2

SPREADSHEET_SHEET_NAME = "Monatsbericht"
TYPOGRAPHIC_MINUS = "−"
