"""Example: use the service layer directly (without Flask).

Goal: controllers are a thin layer, the workflow lives in the services.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from sheets_attendance.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(sheets_config=settings.SHEETS_CONFIG)

    for entry in container.confirmation_service.confirmation_board():
        print(f"{entry.employee_name:<20} {'confirmed' if entry.confirmed else '-'}")

    for req in container.leave_service.list_pending():
        print(f"pending leave: {req.date} {req.name} ({req.leave_type})")


if __name__ == "__main__":
    main()
