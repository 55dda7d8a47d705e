from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ..core.enums import DirectoryOperation
from .model import SyncResult


class RemoteSyncAdapter(Protocol):
    """One network round trip to the attendance directory.

    Implementations never raise for remote problems and never retry: every
    outcome is a SyncSuccess or a SyncFailure.
    """

    def call(self, endpoint: DirectoryOperation, payload: Optional[Mapping[str, Any]] = None) -> SyncResult:
        raise NotImplementedError
