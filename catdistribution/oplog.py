"""
Client for the external operation-log service.

Every mutating action on the catalog (add, update, delete) is recorded
remotely as an operation log entry. The service exposes two endpoints:

* ``GET  {base_url}/operationLogs``           -- list all entries
* ``POST {base_url}/operationLogs/{user_id}`` -- record an entry for a user

The client is deliberately best-effort. Transport failures (network
errors, HTTP errors, timeouts, unparsable bodies) are logged and turned
into a ``None`` result. Nothing is retried and no exception reaches the
caller, so callers must treat ``None`` as "the operation failed".

The active user is passed to the constructor instead of being looked up
from a global session.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, List, Optional

from pydantic import ValidationError

from . import config
from .models import OperationLogEntry, User

logger = logging.getLogger(__name__)

_HEADERS = {
    "User-Agent": "cat-distribution-system/1.0",
    "Accept": "application/json",
}


class OperationLogClient:
    def __init__(
        self,
        user: Optional[User],
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        settings = config.get_settings()
        self.user = user
        self.base_url = (base_url or settings.log_api_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout

    @property
    def logs_url(self) -> str:
        return f"{self.base_url}/operationLogs"

    def _request_json(self, request: urllib.request.Request) -> Optional[Any]:
        """Send ``request`` and return the decoded JSON body, or ``None``."""
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                if not 200 <= response.status < 300:
                    logger.warning(
                        "Operation log request to %s returned status %s",
                        request.full_url,
                        response.status,
                    )
                    return None
                body = response.read().decode("utf-8", errors="ignore")
                return json.loads(body) if body.strip() else None
        except urllib.error.HTTPError as exc:
            logger.error("Operation log request to %s failed with HTTP %s", request.full_url, exc.code)
        except OSError as exc:
            logger.error("Error contacting operation log service at %s: %s", request.full_url, exc)
        except ValueError as exc:
            logger.error("Invalid JSON from %s: %s", request.full_url, exc)
        return None

    def fetch_logs(self) -> Optional[List[OperationLogEntry]]:
        """Return every remote log entry, or ``None`` if the request failed."""
        request = urllib.request.Request(self.logs_url, headers=_HEADERS, method="GET")
        data = self._request_json(request)
        if data is None:
            return None
        if not isinstance(data, list):
            logger.error("Expected a list of operation logs, got %s", type(data).__name__)
            return None
        entries: List[OperationLogEntry] = []
        for item in data:
            try:
                entries.append(OperationLogEntry.model_validate(item))
            except ValidationError as exc:
                logger.warning("Skipping malformed operation log %r: %s", item, exc)
        return entries

    def add_log(self, entry: OperationLogEntry) -> Optional[OperationLogEntry]:
        """Record ``entry`` for the active user.

        Returns the entry created by the service, or ``None`` when the
        request failed or no user is signed in.
        """
        if self.user is None:
            logger.error("Cannot add operation log %r: no active user", entry.action)
            return None
        if entry.user_id is None:
            entry = entry.model_copy(update={"user_id": self.user.id})
        url = f"{self.logs_url}/{urllib.parse.quote(self.user.id)}"
        request = urllib.request.Request(
            url,
            data=json.dumps(entry.to_payload()).encode("utf-8"),
            headers={**_HEADERS, "Content-Type": "application/json"},
            method="POST",
        )
        data = self._request_json(request)
        if data is None:
            return None
        try:
            return OperationLogEntry.model_validate(data)
        except ValidationError as exc:
            logger.error("Unexpected operation log response %r: %s", data, exc)
            return None
