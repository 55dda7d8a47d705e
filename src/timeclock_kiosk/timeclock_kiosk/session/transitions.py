from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from ..core.enums import AttendanceAction, AttendanceStatus
from ..core.exceptions import ActionRejectedLocally
from ..roster.model import Employee


@dataclass(frozen=True)
class Transition:
    action: AttendanceAction
    source: AttendanceStatus
    target: AttendanceStatus
    requires_timesheet: bool
    ends_session: bool
    success_message: str
    failure_message: str


# Break is a sub-state of the on-duty period; clock-out only from ON_DUTY.
TRANSITIONS: Dict[AttendanceAction, Transition] = {
    AttendanceAction.CLOCK_IN: Transition(
        action=AttendanceAction.CLOCK_IN,
        source=AttendanceStatus.OFF_DUTY,
        target=AttendanceStatus.ON_DUTY,
        requires_timesheet=False,
        ends_session=False,
        success_message="Successfully clocked in!",
        failure_message="Failed to clock in",
    ),
    AttendanceAction.START_BREAK: Transition(
        action=AttendanceAction.START_BREAK,
        source=AttendanceStatus.ON_DUTY,
        target=AttendanceStatus.ON_BREAK,
        requires_timesheet=True,
        ends_session=False,
        success_message="Break started!",
        failure_message="Failed to start break",
    ),
    AttendanceAction.END_BREAK: Transition(
        action=AttendanceAction.END_BREAK,
        source=AttendanceStatus.ON_BREAK,
        target=AttendanceStatus.ON_DUTY,
        requires_timesheet=True,
        ends_session=False,
        success_message="Break ended!",
        failure_message="Failed to end break",
    ),
    AttendanceAction.CLOCK_OUT: Transition(
        action=AttendanceAction.CLOCK_OUT,
        source=AttendanceStatus.ON_DUTY,
        target=AttendanceStatus.OFF_DUTY,
        requires_timesheet=True,
        ends_session=True,
        success_message="Successfully clocked out!",
        failure_message="Failed to clock out",
    ),
}


def is_allowed(action: AttendanceAction, employee: Employee) -> bool:
    transition = TRANSITIONS[AttendanceAction(action)]
    if employee.status != transition.source:
        return False
    if transition.requires_timesheet and not employee.active_timesheet_id:
        return False
    return True


def transition_for(action: AttendanceAction, employee: Employee) -> Transition:
    """Return the transition for ``action`` or raise ActionRejectedLocally."""
    action = AttendanceAction(action)
    if not is_allowed(action, employee):
        raise ActionRejectedLocally(
            f"{action.value} is not allowed for employee {employee.id} in status {employee.status.value}"
        )
    return TRANSITIONS[action]


def available_actions(employee: Employee) -> List[AttendanceAction]:
    return [action for action in TRANSITIONS if is_allowed(action, employee)]
