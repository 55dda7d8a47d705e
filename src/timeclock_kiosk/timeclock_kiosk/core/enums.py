from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Where an employee currently is in their working day."""

    OFF_DUTY = "OFF_DUTY"
    ON_DUTY = "ON_DUTY"
    ON_BREAK = "ON_BREAK"


class AttendanceAction(str, Enum):
    """Actions the kiosk can submit for the identified employee."""

    CLOCK_IN = "clock-in"
    START_BREAK = "start-break"
    END_BREAK = "end-break"
    CLOCK_OUT = "clock-out"


class ActionResult(str, Enum):
    APPLIED = "APPLIED"
    FAILED = "FAILED"
    REJECTED = "REJECTED"


class IdentificationMode(str, Enum):
    """How a worker tells the kiosk who they are (deployment setting)."""

    SELECTION = "selection"
    PIN = "pin"


class MessageKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class RosterFallbackPolicy(str, Enum):
    """What to show when the roster cannot be fetched and nothing is cached.

    FAIL_CLOSED shows an empty roster, FAIL_OPEN installs the seed roster.
    """

    FAIL_CLOSED = "fail_closed"
    FAIL_OPEN = "fail_open"


class RosterSource(str, Enum):
    REMOTE = "REMOTE"
    CACHED = "CACHED"
    SEED = "SEED"
    EMPTY = "EMPTY"


class DirectoryOperation(str, Enum):
    """The five fixed operations of the remote attendance directory."""

    GET_EMPLOYEES = "get-employees"
    CLOCK_IN = "clock-in"
    START_BREAK = "start-break"
    END_BREAK = "end-break"
    CLOCK_OUT = "clock-out"
