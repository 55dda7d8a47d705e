from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import optional_pin, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

_TIMESHEET_KEYS = ("timesheetId", "activeTimesheetId", "currentTimesheetId")


@dataclass(frozen=True)
class Employee:
    """Domain entity: one person on the kiosk roster.

    A record is OFF_DUTY exactly when it carries no active timesheet id.
    """

    id: str
    name: str
    pin_code: Optional[str] = None
    status: AttendanceStatus = AttendanceStatus.OFF_DUTY
    active_timesheet_id: Optional[str] = None

    def __post_init__(self) -> None:
        off_duty = self.status == AttendanceStatus.OFF_DUTY
        if off_duty != (self.active_timesheet_id is None):
            raise ValidationError(
                f"Employee {self.id}: status {self.status.value} does not match timesheet id {self.active_timesheet_id!r}"
            )

    @property
    def is_clocked_in(self) -> bool:
        return self.status != AttendanceStatus.OFF_DUTY


def _parse_status(entry: Mapping[str, Any]) -> AttendanceStatus:
    raw = entry.get("status")
    if raw is not None and str(raw).strip():
        try:
            return AttendanceStatus(str(raw).strip().upper())
        except ValueError:
            raise ValidationError(f"Unknown attendance status {raw!r}") from None

    # Older directory payloads describe status with two flags.
    if entry.get("onBreak"):
        return AttendanceStatus.ON_BREAK
    if entry.get("active"):
        return AttendanceStatus.ON_DUTY
    return AttendanceStatus.OFF_DUTY


def employee_from_payload(entry: Mapping[str, Any]) -> Employee:
    """Build an Employee from one ``GetEmployees`` roster entry.

    Missing status means OFF_DUTY. A clocked-in entry that arrives without a
    timesheet id cannot be acted on, so it is downgraded to OFF_DUTY.
    """
    employee_id = require_non_empty(entry.get("id"), "id")
    name = require_non_empty(entry.get("name"), "name")

    raw_pin = entry.get("pinCode")
    pin_code = optional_pin(raw_pin)
    if raw_pin is not None and pin_code is None:
        logger.warning("Ignoring malformed PIN for employee %s", employee_id)

    status = _parse_status(entry)
    timesheet_id = next(
        (str(entry[k]) for k in _TIMESHEET_KEYS if entry.get(k) not in (None, "")),
        None,
    )

    if status == AttendanceStatus.OFF_DUTY:
        timesheet_id = None
    elif timesheet_id is None:
        logger.warning(
            "Employee %s reported %s without a timesheet id; treating as OFF_DUTY",
            employee_id,
            status.value,
        )
        status = AttendanceStatus.OFF_DUTY

    return Employee(
        id=employee_id,
        name=name,
        pin_code=pin_code,
        status=status,
        active_timesheet_id=timesheet_id,
    )
