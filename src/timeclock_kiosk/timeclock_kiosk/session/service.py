from __future__ import annotations

import logging
from datetime import datetime
from threading import RLock
from typing import Callable, Optional, Tuple

from ..common.datetime_utils import now_utc
from ..core.enums import ActionResult, AttendanceAction, IdentificationMode, RosterSource
from ..core.exceptions import ActionRejectedLocally, RemoteActionFailure, UnknownEmployee, WrongPin
from ..directory.service import DirectoryService
from ..identity.factory import IdentityStrategyFactory
from ..identity.pin_entry import PinEntry, PinKey
from ..roster.model import Employee
from ..roster.repository import RosterRepository
from ..roster.service import RosterLoadOutcome, RosterService
from .messages import MessageBoard
from .model import EmployeeRow, KioskView
from .transitions import Transition, available_actions, transition_for

logger = logging.getLogger(__name__)

_ROSTER_FAILURE_MESSAGES = {
    RosterSource.CACHED: "Could not refresh employees; showing the last known list",
    RosterSource.SEED: "Could not load employees; showing the default list",
    RosterSource.EMPTY: "Could not load employees",
}


class AttendanceSessionController:
    """The kiosk's attendance state machine.

    Owns the identified-employee slot (an id into the roster, never a copy),
    the single in-flight action and the transient message. Every state
    change happens under one lock; remote calls run outside it so a second
    request sees the pending action and is rejected instead of queued.
    """

    def __init__(
        self,
        roster: RosterRepository,
        roster_service: RosterService,
        directory: DirectoryService,
        messages: MessageBoard,
        *,
        mode: IdentificationMode = IdentificationMode.SELECTION,
        identity_factory: Optional[IdentityStrategyFactory] = None,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._roster = roster
        self._roster_service = roster_service
        self._directory = directory
        self._messages = messages
        self._mode = IdentificationMode(mode)
        self._identity = (identity_factory or IdentityStrategyFactory()).for_mode(self._mode)
        self._clock = clock

        self._lock = RLock()
        self._identified_id: Optional[str] = None
        self._pending: Optional[AttendanceAction] = None
        self._pin = PinEntry()

    # ----- read side -----

    @property
    def mode(self) -> IdentificationMode:
        return self._mode

    @property
    def pending_action(self) -> Optional[AttendanceAction]:
        with self._lock:
            return self._pending

    @property
    def identified_employee(self) -> Optional[Employee]:
        with self._lock:
            return self._live_employee()

    def view(self) -> KioskView:
        with self._lock:
            employee = self._live_employee()
            actions: Tuple[AttendanceAction, ...] = ()
            if employee is not None and self._pending is None:
                actions = tuple(available_actions(employee))
            return KioskView(
                mode=self._mode,
                roster_loaded=self._roster.is_loaded,
                employees=tuple(EmployeeRow.of(e) for e in self._roster.all()),
                identified=EmployeeRow.of(employee) if employee else None,
                available_actions=actions,
                pending_action=self._pending,
                pin_length=len(self._pin),
                pin_submittable=self._pin_is_live() and self._pin.is_submittable,
                message=self._messages.current,
            )

    # ----- roster -----

    def refresh_roster(self) -> RosterLoadOutcome:
        outcome = self._roster_service.load()
        with self._lock:
            if outcome.error:
                self._messages.error(_ROSTER_FAILURE_MESSAGES.get(outcome.source, "Could not load employees"))
            # Drops the identification if the employee left the roster.
            self._live_employee()
        return outcome

    # ----- identification -----

    def select_employee(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            if self._mode != IdentificationMode.SELECTION:
                logger.debug("Ignoring list selection in %s mode", self._mode.value)
                return None
            if self._pending is not None:
                logger.debug("Ignoring selection while %s is in flight", self._pending.value)
                return None
            try:
                employee = self._identity.resolve(self._roster, str(employee_id))
            except UnknownEmployee as e:
                logger.info("Selection failed: %s", e)
                self._messages.error("Employee not found")
                return None

            self._identified_id = employee.id
            return employee

    def press_key(self, key: str) -> Optional[Employee]:
        """Keyboard or on-screen keypad input for PIN mode."""
        if len(key) == 1 and key in "0123456789":
            self.press_digit(key)
            return None

        command = PinEntry.classify(key)
        if command == PinKey.BACKSPACE:
            self.backspace()
        elif command == PinKey.CLEAR:
            self.clear_pin()
        elif command == PinKey.ENTER:
            return self.submit_pin()
        return None

    def press_digit(self, digit: str) -> bool:
        with self._lock:
            if not self._pin_is_live():
                return False
            return self._pin.press(digit)

    def backspace(self) -> None:
        with self._lock:
            if self._pin_is_live():
                self._pin.backspace()

    def clear_pin(self) -> None:
        with self._lock:
            self._pin.clear()

    def submit_pin(self) -> Optional[Employee]:
        with self._lock:
            if not self._pin_is_live():
                return None
            pin = self._pin.take()
            if pin is None:
                return None
            try:
                employee = self._identity.resolve(self._roster, pin)
            except WrongPin:
                logger.info("PIN did not match any employee")
                self._messages.error("Wrong PIN")
                return None

            self._identified_id = employee.id
            return employee

    def cancel(self) -> ActionResult:
        with self._lock:
            if self._pending is not None:
                logger.debug("Cancel rejected while %s is in flight", self._pending.value)
                return ActionResult.REJECTED
            self._identified_id = None
            self._pin.clear()
            return ActionResult.APPLIED

    # ----- attendance actions -----

    def clock_in(self) -> ActionResult:
        return self.perform(AttendanceAction.CLOCK_IN)

    def start_break(self) -> ActionResult:
        return self.perform(AttendanceAction.START_BREAK)

    def end_break(self) -> ActionResult:
        return self.perform(AttendanceAction.END_BREAK)

    def clock_out(self) -> ActionResult:
        return self.perform(AttendanceAction.CLOCK_OUT)

    def perform(self, action: AttendanceAction) -> ActionResult:
        action = AttendanceAction(action)
        try:
            employee, transition, submitted_at = self._begin(action)
        except ActionRejectedLocally as e:
            logger.debug("Rejected %s: %s", action.value, e)
            return ActionResult.REJECTED

        try:
            timesheet_id = self._dispatch(transition, employee, submitted_at)
        except RemoteActionFailure as e:
            logger.warning("%s failed for employee %s: %s", action.value, employee.id, e)
            with self._lock:
                self._messages.error(f"Error: {transition.failure_message} ({e})")
            return ActionResult.FAILED
        else:
            with self._lock:
                self._apply(employee, transition, timesheet_id)
            return ActionResult.APPLIED
        finally:
            with self._lock:
                self._pending = None

    def _begin(self, action: AttendanceAction) -> Tuple[Employee, Transition, datetime]:
        with self._lock:
            if self._pending is not None:
                raise ActionRejectedLocally(f"{self._pending.value} is already in flight")
            employee = self._live_employee()
            if employee is None:
                raise ActionRejectedLocally("no employee identified")
            transition = transition_for(action, employee)

            submitted_at = self._clock()
            self._pending = action
            self._messages.clear()
            return employee, transition, submitted_at

    def _dispatch(self, transition: Transition, employee: Employee, at: datetime) -> Optional[str]:
        """Send the action; returns the timesheet id the employee should hold afterwards."""
        action = transition.action
        if action == AttendanceAction.CLOCK_IN:
            return self._directory.clock_in(employee, at=at)

        timesheet_id = str(employee.active_timesheet_id)
        if action == AttendanceAction.START_BREAK:
            self._directory.start_break(timesheet_id, at=at)
        elif action == AttendanceAction.END_BREAK:
            self._directory.end_break(timesheet_id, at=at)
        elif action == AttendanceAction.CLOCK_OUT:
            self._directory.clock_out(timesheet_id, at=at)
            return None
        return timesheet_id

    def _apply(self, employee: Employee, transition: Transition, timesheet_id: Optional[str]) -> None:
        try:
            self._roster.apply_status_change(employee.id, transition.target, timesheet_id)
        except UnknownEmployee:
            # Roster was refreshed during the call and the employee is gone.
            logger.warning("Employee %s left the roster before %s was applied", employee.id, transition.action.value)
            self._identified_id = None
        else:
            logger.info("Employee %s: %s -> %s", employee.id, transition.source.value, transition.target.value)

        if transition.ends_session and self._identified_id == employee.id:
            self._identified_id = None
            self._pin.clear()
        self._messages.success(transition.success_message)

    # ----- helpers -----

    def _live_employee(self) -> Optional[Employee]:
        if self._identified_id is None:
            return None
        employee = self._roster.get_by_id(self._identified_id)
        if employee is None:
            logger.info("Identified employee %s is no longer on the roster", self._identified_id)
            self._identified_id = None
        return employee

    def _pin_is_live(self) -> bool:
        return (
            self._mode == IdentificationMode.PIN
            and self._identified_id is None
            and self._pending is None
        )
