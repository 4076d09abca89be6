import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SHEETS_CONFIG = {
    "spreadsheet_id": os.getenv("SPREADSHEET_ID", ""),
    "api_key": os.getenv("GOOGLE_SHEETS_API_KEY", ""),
    "access_token": os.getenv("GOOGLE_SHEETS_ACCESS_TOKEN", ""),
    "timeout": float(os.getenv("SHEETS_TIMEOUT", "10")),
    "retries": int(os.getenv("SHEETS_RETRIES", "3")),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

# Check-in requires a security confirmation, check-out requires 17:00.
ENFORCE_GATES = bool(int(os.getenv("ENFORCE_GATES", "1")))
# Approving a leave overwrites the status cells of an existing check-in row.
OVERWRITE_ON_APPROVAL = bool(int(os.getenv("OVERWRITE_ON_APPROVAL", "1")))
