from __future__ import annotations

import logging
from dataclasses import replace
from threading import RLock
from typing import Dict, Iterable, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import UnknownEmployee
from .model import Employee
from .repository import RosterRepository

logger = logging.getLogger(__name__)


class InMemoryRosterRepository(RosterRepository):
    """Memory-resident roster indexed by employee id.

    Insertion order is the roster order used for PIN tie-breaks.
    """

    def __init__(self, employees: Iterable[Employee] = ()):
        self._lock = RLock()
        self._by_id: Dict[str, Employee] = {}
        self._loaded = False
        employees = list(employees)
        if employees:
            self.replace(employees)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def all(self) -> Sequence[Employee]:
        with self._lock:
            return list(self._by_id.values())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self._by_id.get(str(employee_id))

    def find_first_by_pin(self, pin: str) -> Optional[Employee]:
        with self._lock:
            for employee in self._by_id.values():
                if employee.pin_code is not None and employee.pin_code == pin:
                    return employee
            return None

    def replace(self, employees: Iterable[Employee]) -> None:
        by_id: Dict[str, Employee] = {}
        for employee in employees:
            if employee.id in by_id:
                logger.warning("Duplicate employee id %s in roster; keeping the first entry", employee.id)
                continue
            by_id[employee.id] = employee

        with self._lock:
            self._by_id = by_id
            self._loaded = True

    def apply_status_change(
        self,
        employee_id: str,
        new_status: AttendanceStatus,
        new_timesheet_id: Optional[str],
    ) -> bool:
        with self._lock:
            current = self._by_id.get(str(employee_id))
            if current is None:
                raise UnknownEmployee(f"Employee {employee_id} is not on the roster")

            if current.status == new_status and current.active_timesheet_id == new_timesheet_id:
                return False

            # dict keeps key order on reassignment, so roster order is stable.
            self._by_id[current.id] = replace(current, status=new_status, active_timesheet_id=new_timesheet_id)
            return True
