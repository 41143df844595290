"""
Subscribable "prefers dark" signal.

Models the browser's ``matchMedia('(prefers-color-scheme: dark)')`` as a plain
observer interface so the resolver does not depend on where the signal comes
from.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

SignalCallback = Callable[[bool], None]


class Subscription:
    """Handle returned by ``subscribe``. ``unsubscribe`` is idempotent."""

    def __init__(self, release: Callable[[], None]):
        self._release: Callable[[], None] | None = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def unsubscribe(self) -> None:
        release, self._release = self._release, None
        if release is not None:
            release()


class SystemSignalSource(Protocol):
    def prefers_dark(self) -> bool: ...  # noqa: E704

    def subscribe(self, callback: SignalCallback) -> Subscription: ...  # noqa: E704


class ManualSystemSignalSource:
    """
    Signal source whose value is pushed in from outside.

    The browser client reports changes through the API; callbacks fire only
    when the value actually changes, like a media-query change event.
    """

    def __init__(self, prefers_dark: bool = True):
        self._prefers_dark = prefers_dark
        self._callbacks: list[SignalCallback] = []
        self._lock = threading.Lock()

    def prefers_dark(self) -> bool:
        return self._prefers_dark

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._callbacks)

    def subscribe(self, callback: SignalCallback) -> Subscription:
        with self._lock:
            self._callbacks.append(callback)

        def release() -> None:
            with self._lock:
                if callback in self._callbacks:
                    self._callbacks.remove(callback)

        return Subscription(release)

    def set_prefers_dark(self, prefers_dark: bool) -> bool:
        """Update the signal. Returns True if it changed and subscribers were notified."""
        with self._lock:
            if prefers_dark == self._prefers_dark:
                return False
            self._prefers_dark = prefers_dark
            callbacks = list(self._callbacks)

        logger.debug("System signal changed: prefers_dark=%s", prefers_dark)
        for callback in callbacks:
            callback(prefers_dark)
        return True
