from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..core.enums import AttendanceAction, AttendanceStatus, IdentificationMode
from ..roster.model import Employee
from .messages import TransientMessage


@dataclass(frozen=True)
class EmployeeRow:
    """Read-model for one roster entry on screen (never carries the PIN)."""

    id: str
    name: str
    status: AttendanceStatus

    @classmethod
    def of(cls, employee: Employee) -> "EmployeeRow":
        return cls(id=employee.id, name=employee.name, status=employee.status)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "status": self.status.value}


@dataclass(frozen=True)
class KioskView:
    """Everything the presentation layer needs to draw the kiosk."""

    mode: IdentificationMode
    roster_loaded: bool
    employees: Tuple[EmployeeRow, ...]
    identified: Optional[EmployeeRow]
    available_actions: Tuple[AttendanceAction, ...]
    pending_action: Optional[AttendanceAction]
    pin_length: int
    pin_submittable: bool
    message: Optional[TransientMessage]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "rosterLoaded": self.roster_loaded,
            "employees": [row.to_dict() for row in self.employees],
            "identified": self.identified.to_dict() if self.identified else None,
            "availableActions": [a.value for a in self.available_actions],
            "pendingAction": self.pending_action.value if self.pending_action else None,
            "pinLength": self.pin_length,
            "pinSubmittable": self.pin_submittable,
            "message": (
                {"text": self.message.text, "kind": self.message.kind.value} if self.message else None
            ),
        }
