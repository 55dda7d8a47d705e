from __future__ import annotations

from abc import ABC, abstractmethod

from ...roster.model import Employee
from ...roster.repository import RosterRepository


class IdentityStrategy(ABC):
    """Strategy Pattern: encapsulate how raw kiosk input becomes an employee."""

    @abstractmethod
    def resolve(self, roster: RosterRepository, raw: str) -> Employee:
        raise NotImplementedError
