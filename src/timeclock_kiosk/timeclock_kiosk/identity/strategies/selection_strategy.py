from __future__ import annotations

from ...core.exceptions import UnknownEmployee
from ...roster.model import Employee
from ...roster.repository import RosterRepository
from .base import IdentityStrategy


class SelectionStrategy(IdentityStrategy):
    """Employee picked straight from the rendered list (lookup by id)."""

    def resolve(self, roster: RosterRepository, raw: str) -> Employee:
        employee = roster.get_by_id(str(raw))
        if employee is None:
            raise UnknownEmployee(f"Employee {raw} is not on the roster")
        return employee
