from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from timeclock_kiosk.container import build_container


def main() -> int:
    """Fetch the roster once and report what the kiosk would show."""
    settings = importlib.import_module(get_settings_module())
    kiosk_config = dict(settings.KIOSK_CONFIG)

    container = build_container(kiosk_config=kiosk_config)
    outcome = container.roster_service.load()

    print(f"directory={kiosk_config['directory_base_url']} source={outcome.source.value} employees={outcome.employee_count}")
    if outcome.error:
        print(f"FAILED: {outcome.error}")
        return 1

    for employee in container.roster_repo.all():
        timesheet = employee.active_timesheet_id if employee.is_clocked_in else "-"
        print(f"  {employee.id:>6}  {employee.status.value:<9} {timesheet:<12} {employee.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
