from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .core.constants import DEFAULT_DIRECTORY_TIMEOUT_SECONDS, DEFAULT_MESSAGE_SECONDS
from .core.enums import IdentificationMode, RosterFallbackPolicy
from .directory.adapter import RemoteSyncAdapter
from .directory.http_adapter import HttpSyncAdapter
from .directory.model import DirectoryEndpoints
from .directory.service import DirectoryService
from .identity.factory import IdentityStrategyFactory
from .roster.memory_roster_repository import InMemoryRosterRepository
from .roster.model import employee_from_payload
from .roster.service import RosterService
from .session.messages import MessageBoard
from .session.scheduler import Scheduler, ThreadingScheduler
from .session.service import AttendanceSessionController


@dataclass(frozen=True)
class Container:
    roster_repo: InMemoryRosterRepository
    adapter: RemoteSyncAdapter

    directory_service: DirectoryService
    roster_service: RosterService
    messages: MessageBoard
    session_controller: AttendanceSessionController


def build_container(
    *,
    kiosk_config: Mapping[str, Any],
    adapter: Optional[RemoteSyncAdapter] = None,
    scheduler: Optional[Scheduler] = None,
) -> Container:
    endpoints = DirectoryEndpoints.from_base_url(
        str(kiosk_config["directory_base_url"]),
        overrides=kiosk_config.get("directory_urls") or {},
    )
    adapter = adapter or HttpSyncAdapter(
        endpoints,
        timeout=float(kiosk_config.get("directory_timeout", DEFAULT_DIRECTORY_TIMEOUT_SECONDS)),
        headers=kiosk_config.get("directory_headers") or {},
    )

    roster_repo = InMemoryRosterRepository()
    directory_service = DirectoryService(adapter)
    roster_service = RosterService(
        roster_repo,
        directory_service,
        fallback_policy=RosterFallbackPolicy(kiosk_config.get("roster_fallback_policy", RosterFallbackPolicy.FAIL_CLOSED.value)),
        seed_employees=[employee_from_payload(e) for e in kiosk_config.get("seed_employees") or ()],
    )
    messages = MessageBoard(
        scheduler or ThreadingScheduler(),
        duration=float(kiosk_config.get("message_seconds", DEFAULT_MESSAGE_SECONDS)),
    )
    session_controller = AttendanceSessionController(
        roster_repo,
        roster_service,
        directory_service,
        messages,
        mode=IdentificationMode(kiosk_config.get("identification_mode", IdentificationMode.SELECTION.value)),
        identity_factory=IdentityStrategyFactory(),
    )

    return Container(
        roster_repo=roster_repo,
        adapter=adapter,
        directory_service=directory_service,
        roster_service=roster_service,
        messages=messages,
        session_controller=session_controller,
    )
