from __future__ import annotations

import pytest

from timeclock_kiosk.core.enums import AttendanceStatus
from timeclock_kiosk.core.exceptions import UnknownEmployee
from timeclock_kiosk.roster.memory_roster_repository import InMemoryRosterRepository
from timeclock_kiosk.roster.model import Employee


def test_not_loaded_until_replaced():
    repo = InMemoryRosterRepository()
    assert repo.is_loaded is False

    repo.replace([])
    assert repo.is_loaded is True


def test_apply_status_change_updates_one_record(employees):
    repo = InMemoryRosterRepository(employees)

    changed = repo.apply_status_change("2", AttendanceStatus.ON_DUTY, "T1")

    assert changed is True
    assert repo.get_by_id("2").status == AttendanceStatus.ON_DUTY
    assert repo.get_by_id("2").active_timesheet_id == "T1"
    assert repo.get_by_id("1").status == AttendanceStatus.OFF_DUTY
    assert [e.id for e in repo.all()] == ["1", "2", "3"]


def test_apply_status_change_is_idempotent(employees):
    repo = InMemoryRosterRepository(employees)

    assert repo.apply_status_change("1", AttendanceStatus.ON_DUTY, "T1") is True
    assert repo.apply_status_change("1", AttendanceStatus.ON_DUTY, "T1") is False
    assert repo.get_by_id("1").active_timesheet_id == "T1"


def test_apply_status_change_unknown_employee(employees):
    repo = InMemoryRosterRepository(employees)

    with pytest.raises(UnknownEmployee):
        repo.apply_status_change("99", AttendanceStatus.ON_DUTY, "T1")


def test_first_pin_match_wins():
    repo = InMemoryRosterRepository(
        [
            Employee(id="a", name="First", pin_code="1111"),
            Employee(id="b", name="Second", pin_code="1111"),
        ]
    )

    assert repo.find_first_by_pin("1111").id == "a"


def test_duplicate_ids_keep_first_entry():
    repo = InMemoryRosterRepository(
        [
            Employee(id="1", name="Kept"),
            Employee(id="1", name="Dropped"),
        ]
    )

    assert len(repo.all()) == 1
    assert repo.get_by_id("1").name == "Kept"
