from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..core.enums import RosterFallbackPolicy, RosterSource
from ..core.exceptions import RosterLoadFailure
from ..directory.service import DirectoryService
from .model import Employee
from .repository import RosterRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RosterLoadOutcome:
    """What a roster load ended up showing, and why."""

    source: RosterSource
    employee_count: int
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.source == RosterSource.REMOTE


class RosterService:
    """Use case: load the roster from the directory with an explicit fallback.

    On failure the last good roster is kept. With nothing cached,
    FAIL_CLOSED leaves the roster empty and FAIL_OPEN installs the seed list.
    """

    def __init__(
        self,
        roster: RosterRepository,
        directory: DirectoryService,
        *,
        fallback_policy: RosterFallbackPolicy = RosterFallbackPolicy.FAIL_CLOSED,
        seed_employees: Iterable[Employee] = (),
    ):
        self._roster = roster
        self._directory = directory
        self._policy = RosterFallbackPolicy(fallback_policy)
        self._seed: Sequence[Employee] = tuple(seed_employees)
        self._has_remote_roster = False
        self._last_source: Optional[RosterSource] = None

    @property
    def fallback_policy(self) -> RosterFallbackPolicy:
        return self._policy

    def load(self) -> RosterLoadOutcome:
        try:
            employees = self._directory.get_employees()
        except RosterLoadFailure as e:
            return self._fall_back(str(e))

        self._roster.replace(employees)
        self._has_remote_roster = True
        self._last_source = RosterSource.REMOTE
        logger.info("Roster loaded from directory (%d employees)", len(employees))
        return RosterLoadOutcome(source=RosterSource.REMOTE, employee_count=len(employees))

    def _fall_back(self, reason: str) -> RosterLoadOutcome:
        if self._has_remote_roster:
            count = len(self._roster.all())
            logger.warning("Roster refresh failed (%s); keeping previous roster of %d employees", reason, count)
            return RosterLoadOutcome(source=RosterSource.CACHED, employee_count=count, error=reason)

        if self._policy == RosterFallbackPolicy.FAIL_OPEN and self._seed:
            # Keep seed records (and any status changes on them) across repeated failures.
            if self._last_source != RosterSource.SEED:
                self._roster.replace(self._seed)
            self._last_source = RosterSource.SEED
            logger.warning("Roster load failed (%s); using seed roster of %d employees", reason, len(self._seed))
            return RosterLoadOutcome(source=RosterSource.SEED, employee_count=len(self._seed), error=reason)

        self._roster.replace([])
        self._last_source = RosterSource.EMPTY
        logger.warning("Roster load failed (%s); roster is empty", reason)
        return RosterLoadOutcome(source=RosterSource.EMPTY, employee_count=0, error=reason)
