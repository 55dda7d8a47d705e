from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from ..core.constants import DEFAULT_DIRECTORY_TIMEOUT_SECONDS
from ..core.enums import DirectoryOperation
from .adapter import RemoteSyncAdapter
from .model import DirectoryEndpoints, SyncFailure, SyncResult, SyncSuccess

logger = logging.getLogger(__name__)

# Operations whose success body carries data the kiosk needs.
_BODY_REQUIRED = {DirectoryOperation.GET_EMPLOYEES, DirectoryOperation.CLOCK_IN}


class HttpSyncAdapter(RemoteSyncAdapter):
    """RemoteSyncAdapter over HTTP/JSON using a shared requests session."""

    def __init__(
        self,
        endpoints: DirectoryEndpoints,
        *,
        timeout: float = DEFAULT_DIRECTORY_TIMEOUT_SECONDS,
        headers: Optional[Mapping[str, str]] = None,
        session: Optional[requests.Session] = None,
    ):
        self._endpoints = endpoints
        self._timeout = float(timeout)
        self._session = session or requests.Session()
        if headers:
            self._session.headers.update(dict(headers))

    def call(self, endpoint: DirectoryOperation, payload: Optional[Mapping[str, Any]] = None) -> SyncResult:
        url = self._endpoints.url_for(endpoint)
        try:
            if endpoint == DirectoryOperation.GET_EMPLOYEES:
                resp = self._session.get(url, timeout=self._timeout)
            else:
                resp = self._session.post(url, json=dict(payload or {}), timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning("Directory %s request failed: %s", endpoint.value, e)
            return SyncFailure(reason=f"Network error: {e}")

        if not resp.ok:
            logger.warning("Directory %s returned HTTP %s", endpoint.value, resp.status_code)
            return SyncFailure(reason=f"Directory returned HTTP {resp.status_code}")

        body = self._decode(resp)
        if body is None:
            if endpoint in _BODY_REQUIRED:
                logger.warning("Directory %s returned an unreadable body", endpoint.value)
                return SyncFailure(reason="Directory returned an invalid response")
            body = {}

        return SyncSuccess(body=body)

    @staticmethod
    def _decode(resp: requests.Response) -> Optional[Dict[str, Any]]:
        if not resp.content:
            return None
        try:
            data = resp.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None
