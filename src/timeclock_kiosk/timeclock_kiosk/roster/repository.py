from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import Employee


class RosterRepository(Protocol):
    """Repository interface for the kiosk roster.

    Note (DIP): the session controller depends on this interface, not on a
    concrete store.
    """

    @property
    def is_loaded(self) -> bool:
        raise NotImplementedError

    def all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def find_first_by_pin(self, pin: str) -> Optional[Employee]:
        raise NotImplementedError

    def replace(self, employees: Iterable[Employee]) -> None:
        raise NotImplementedError

    def apply_status_change(
        self,
        employee_id: str,
        new_status: AttendanceStatus,
        new_timesheet_id: Optional[str],
    ) -> bool:
        """Update one record in place. Returns False when nothing changed."""

        raise NotImplementedError
