"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the same services back scripts like this one.
"""

import importlib

from config import get_settings_module

from src.dayflow.dayflow.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    for employee in container.employee_service.list_employees():
        print(employee)


if __name__ == "__main__":
    main()
