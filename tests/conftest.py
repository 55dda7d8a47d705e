from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

from timeclock_kiosk.core.enums import DirectoryOperation, IdentificationMode, RosterFallbackPolicy
from timeclock_kiosk.directory.model import SyncResult, SyncSuccess
from timeclock_kiosk.directory.service import DirectoryService
from timeclock_kiosk.roster.memory_roster_repository import InMemoryRosterRepository
from timeclock_kiosk.roster.model import Employee
from timeclock_kiosk.roster.service import RosterService
from timeclock_kiosk.session.messages import MessageBoard
from timeclock_kiosk.session.service import AttendanceSessionController


class ScriptedAdapter:
    """RemoteSyncAdapter fake: records calls and returns scripted results."""

    def __init__(self):
        self.calls: List[Tuple[DirectoryOperation, Dict[str, Any]]] = []
        self.results: Dict[DirectoryOperation, SyncResult] = {}
        self.on_call: Optional[Callable[[DirectoryOperation], None]] = None

    def respond(self, op: DirectoryOperation, result: SyncResult) -> None:
        self.results[op] = result

    def call(self, endpoint, payload=None):
        self.calls.append((endpoint, dict(payload or {})))
        if self.on_call is not None:
            self.on_call(endpoint)
        return self.results.get(endpoint, SyncSuccess({}))

    def calls_for(self, op: DirectoryOperation) -> List[Dict[str, Any]]:
        return [payload for endpoint, payload in self.calls if endpoint == op]


@dataclass
class ManualTask:
    delay: float
    callback: Callable[[], None]
    cancelled: bool = False
    done: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler fake: tasks only run when the test says so."""

    def __init__(self):
        self.tasks: List[ManualTask] = []

    def schedule(self, delay, callback):
        task = ManualTask(delay=delay, callback=callback)
        self.tasks.append(task)
        return task

    def run_pending(self) -> None:
        for task in list(self.tasks):
            if not task.cancelled and not task.done:
                task.done = True
                task.callback()


@dataclass
class Kiosk:
    controller: AttendanceSessionController
    roster: InMemoryRosterRepository
    adapter: ScriptedAdapter
    scheduler: ManualScheduler
    messages: MessageBoard
    roster_service: RosterService


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def adapter() -> ScriptedAdapter:
    return ScriptedAdapter()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def make_kiosk(adapter, scheduler, fixed_now):
    def _make(
        employees=(),
        *,
        mode: IdentificationMode = IdentificationMode.SELECTION,
        fallback_policy: RosterFallbackPolicy = RosterFallbackPolicy.FAIL_CLOSED,
        seed=(),
    ) -> Kiosk:
        roster = InMemoryRosterRepository(employees)
        directory = DirectoryService(adapter)
        roster_service = RosterService(roster, directory, fallback_policy=fallback_policy, seed_employees=seed)
        messages = MessageBoard(scheduler, duration=3)
        controller = AttendanceSessionController(
            roster,
            roster_service,
            directory,
            messages,
            mode=mode,
            clock=lambda: fixed_now,
        )
        return Kiosk(
            controller=controller,
            roster=roster,
            adapter=adapter,
            scheduler=scheduler,
            messages=messages,
            roster_service=roster_service,
        )

    return _make


@pytest.fixture
def employees() -> List[Employee]:
    return [
        Employee(id="1", name="Annabelle Cazals", pin_code="1234"),
        Employee(id="2", name="Bohdan Zavhorodnii", pin_code="5678"),
        Employee(id="3", name="Elzbieta Karpinska", pin_code="4321"),
    ]
