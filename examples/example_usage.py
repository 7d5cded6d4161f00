"""Example: using the service layer directly (no terminal menu).

The menu is only a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from company_records.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)
    if not container.file_exists():
        print("Run scripts/init_data.py and scripts/seed_data.py first")
        return

    for department in container.department_service.list_departments():
        staff = container.employee_service.list_for_department(department.depno)
        print(f"{department.name} ({department.location}): {[e.name for e in staff]}")

    container.close()


if __name__ == "__main__":
    main()
