import os

SECRET_KEY = "test-secret"

SHEETS_CONFIG = {
    "spreadsheet_id": os.getenv("SPREADSHEET_ID", "test-spreadsheet"),
    "api_key": "",
    "access_token": "",
    "timeout": 1.0,
    "retries": 0,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

ENFORCE_GATES = bool(int(os.getenv("ENFORCE_GATES", "1")))
OVERWRITE_ON_APPROVAL = bool(int(os.getenv("OVERWRITE_ON_APPROVAL", "1")))
