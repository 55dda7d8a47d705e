from __future__ import annotations

import logging
from datetime import datetime
from typing import List

from ..common.datetime_utils import to_iso_utc
from ..core.enums import DirectoryOperation
from ..core.exceptions import RemoteActionFailure, RosterLoadFailure, ValidationError
from ..roster.model import Employee, employee_from_payload
from .adapter import RemoteSyncAdapter
from .model import SyncFailure

logger = logging.getLogger(__name__)


class DirectoryService:
    """Use case: the five typed directory operations.

    Turns adapter failures into RosterLoadFailure / RemoteActionFailure so
    callers deal with one exception per concern.
    """

    def __init__(self, adapter: RemoteSyncAdapter):
        self._adapter = adapter

    def get_employees(self) -> List[Employee]:
        result = self._adapter.call(DirectoryOperation.GET_EMPLOYEES)
        if isinstance(result, SyncFailure):
            raise RosterLoadFailure(result.reason)

        entries = result.body.get("employees") or []
        if not isinstance(entries, list):
            raise RosterLoadFailure("Directory returned a malformed employee list")

        employees: List[Employee] = []
        for entry in entries:
            if not isinstance(entry, dict):
                logger.warning("Skipping roster entry that is not an object: %r", entry)
                continue
            try:
                employees.append(employee_from_payload(entry))
            except ValidationError as e:
                logger.warning("Skipping invalid roster entry: %s", e)
        return employees

    def clock_in(self, employee: Employee, *, at: datetime) -> str:
        result = self._adapter.call(
            DirectoryOperation.CLOCK_IN,
            {
                "employeeId": employee.id,
                "employeeName": employee.name,
                "clockInTimestamp": to_iso_utc(at),
            },
        )
        if isinstance(result, SyncFailure):
            raise RemoteActionFailure(result.reason)

        timesheet_id = result.body.get("timesheetId")
        if timesheet_id in (None, ""):
            raise RemoteActionFailure("Directory did not return a timesheet id")
        return str(timesheet_id)

    def start_break(self, timesheet_id: str, *, at: datetime) -> None:
        self._send(DirectoryOperation.START_BREAK, {"timesheetId": timesheet_id, "breakStartTimestamp": to_iso_utc(at)})

    def end_break(self, timesheet_id: str, *, at: datetime) -> None:
        self._send(DirectoryOperation.END_BREAK, {"timesheetId": timesheet_id, "breakEndTimestamp": to_iso_utc(at)})

    def clock_out(self, timesheet_id: str, *, at: datetime) -> None:
        self._send(DirectoryOperation.CLOCK_OUT, {"timesheetId": timesheet_id, "clockOutTimestamp": to_iso_utc(at)})

    def _send(self, op: DirectoryOperation, payload: dict) -> None:
        result = self._adapter.call(op, payload)
        if isinstance(result, SyncFailure):
            raise RemoteActionFailure(result.reason)
