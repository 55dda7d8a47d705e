"""Example: drive the session controller directly (no Flask).

Controllers are a thin layer; the attendance state machine lives in the
session service and can be used on its own.
"""

import importlib

from config import get_settings_module

from timeclock_kiosk.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(kiosk_config=settings.KIOSK_CONFIG)
    controller = container.session_controller

    outcome = controller.refresh_roster()
    print(f"roster: {outcome.source.value} ({outcome.employee_count} employees)")
    print(controller.view().to_dict())


if __name__ == "__main__":
    main()
