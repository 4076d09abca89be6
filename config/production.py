import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SHEETS_CONFIG = {
    "spreadsheet_id": os.getenv("SPREADSHEET_ID", ""),
    "api_key": os.getenv("GOOGLE_SHEETS_API_KEY", ""),
    "access_token": os.getenv("GOOGLE_SHEETS_ACCESS_TOKEN", ""),
    "timeout": float(os.getenv("SHEETS_TIMEOUT", "10")),
    "retries": int(os.getenv("SHEETS_RETRIES", "3")),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

ENFORCE_GATES = bool(int(os.getenv("ENFORCE_GATES", "1")))
OVERWRITE_ON_APPROVAL = bool(int(os.getenv("OVERWRITE_ON_APPROVAL", "1")))
