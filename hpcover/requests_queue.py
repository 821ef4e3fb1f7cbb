"""FIFO queue of HTTP requests sent one at a time."""

from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, Optional


class HttpMethod(Enum):
    """HTTP operation performed by a request."""

    GET = "GET"
    POST = "POST"


@dataclass
class HttpRequestFrame:
    """A request with its method, target, headers and JSON payload."""

    method: HttpMethod
    data: dict[str, Any] = field(default_factory=dict)
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    def setup(self, url: str, api_key: str) -> None:
        """Set the target URL and authorization (and content type for POST)."""
        if self.method is HttpMethod.POST:
            self.headers["Content-Type"] = "application/json"
        self.url = url
        self.headers["Authorization"] = api_key

    @property
    def body(self) -> bytes:
        """JSON-encoded payload."""
        return json.dumps(self.data).encode("utf-8")


class RequestQueue:
    """Holds requests in arrival order and lets only one be in flight."""

    def __init__(self, on_failure: Optional[Callable[[], None]] = None) -> None:
        self._tasks: deque[HttpRequestFrame] = deque()
        self.in_process = False
        self.on_failure = on_failure

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[HttpRequestFrame]:
        return iter(self._tasks)

    def add(self, task: HttpRequestFrame) -> None:
        """Append a request at the end of the queue."""
        self._tasks.append(task)

    def execute_next(
        self, send: Callable[[HttpRequestFrame], object]
    ) -> Optional[HttpRequestFrame]:
        """Send the oldest request unless one is in flight or none is queued.

        Returns the request handed to ``send``, or ``None``.
        """
        if self.in_process or self.is_empty():
            return None
        self.in_process = True
        task = self._tasks[0]
        try:
            send(task)
        except BaseException:
            self.in_process = False
            raise
        return task

    def finished(self, ok: bool) -> None:
        """Record the outcome of the request in flight.

        A successful request leaves the queue; a failed one stays and
        ``on_failure`` is called.
        """
        if not ok:
            if self.on_failure is not None:
                self.on_failure()
        elif self._tasks:
            self._tasks.popleft()
        self.in_process = False

    def is_empty(self) -> bool:
        """True when no request is queued."""
        return not self._tasks