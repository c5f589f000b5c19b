"""Example: calling the service layer directly, without Flask.

Controllers stay thin; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.dayflow.dayflow.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    print(container.report_service.analytics())
    print(container.leave_service.list_all())


if __name__ == "__main__":
    main()
