from __future__ import annotations

from ...core.exceptions import WrongPin
from ...roster.model import Employee
from ...roster.repository import RosterRepository
from .base import IdentityStrategy


class PinStrategy(IdentityStrategy):
    """PIN typed on the keypad.

    Exact string match, so "0123" and "123" are different PINs. When two
    employees share a PIN the first one in roster order wins.
    """

    def resolve(self, roster: RosterRepository, raw: str) -> Employee:
        employee = roster.find_first_by_pin(raw)
        if employee is None:
            raise WrongPin("Wrong PIN")
        return employee
