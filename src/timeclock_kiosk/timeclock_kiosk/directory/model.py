from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from ..core.enums import DirectoryOperation


@dataclass(frozen=True)
class SyncSuccess:
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class SyncFailure:
    """Transport errors and non-success statuses both end up here."""

    reason: str

    @property
    def ok(self) -> bool:
        return False


SyncResult = Union[SyncSuccess, SyncFailure]


@dataclass(frozen=True)
class DirectoryEndpoints:
    """One fixed URL per directory operation."""

    get_employees: str
    clock_in: str
    start_break: str
    end_break: str
    clock_out: str

    @classmethod
    def from_base_url(cls, base_url: str, overrides: Optional[Mapping[str, Optional[str]]] = None) -> "DirectoryEndpoints":
        base = base_url.rstrip("/")
        overrides = overrides or {}

        def _url(op: DirectoryOperation) -> str:
            return overrides.get(op.value) or f"{base}/{op.value}"

        return cls(
            get_employees=_url(DirectoryOperation.GET_EMPLOYEES),
            clock_in=_url(DirectoryOperation.CLOCK_IN),
            start_break=_url(DirectoryOperation.START_BREAK),
            end_break=_url(DirectoryOperation.END_BREAK),
            clock_out=_url(DirectoryOperation.CLOCK_OUT),
        )

    def url_for(self, op: DirectoryOperation) -> str:
        return {
            DirectoryOperation.GET_EMPLOYEES: self.get_employees,
            DirectoryOperation.CLOCK_IN: self.clock_in,
            DirectoryOperation.START_BREAK: self.start_break,
            DirectoryOperation.END_BREAK: self.end_break,
            DirectoryOperation.CLOCK_OUT: self.clock_out,
        }[op]
