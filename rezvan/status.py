"""Transient message shown in the message bar."""

import time
from typing import Callable, Optional

from .constants import EditorConstants


class StatusMessage:
    """A message that expires a fixed time after it was set."""

    def __init__(self, initial_message: Optional[str] = None,
                 timeout: float = EditorConstants.MESSAGE_TIMEOUT,
                 clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.timeout = timeout
        self._message: Optional[str] = None
        self._set_time: Optional[float] = None
        if initial_message is not None:
            self.set_message(initial_message)

    def set_message(self, message: str):
        self._message = message
        self._set_time = self._clock()

    def clear(self):
        self._message = None
        self._set_time = None

    def message(self) -> Optional[str]:
        """The current message, or None once it has expired."""
        if self._set_time is None:
            return None
        if self._clock() - self._set_time > self.timeout:
            self.clear()
            return None
        return self._message
