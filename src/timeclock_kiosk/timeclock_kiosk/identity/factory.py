from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import IdentificationMode
from .strategies.base import IdentityStrategy
from .strategies.pin_strategy import PinStrategy
from .strategies.selection_strategy import SelectionStrategy


@dataclass
class IdentityStrategyFactory:
    """Factory Pattern: choose the identification strategy for a deployment."""

    def for_mode(self, mode: IdentificationMode) -> IdentityStrategy:
        if IdentificationMode(mode) == IdentificationMode.PIN:
            return PinStrategy()
        return SelectionStrategy()
