"""
Display mode resolution.

Reconciles the user's three-valued preference (system / light / dark) with the
live system signal into one effective mode, and persists the preference.

The three mutating entry points (``set_preference``, ``cycle`` and
``on_system_signal_changed``) share one re-entrant lock: the signal callback
may arrive from any thread.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from dashboard.core.errors import InvalidPreferenceError
from dashboard.models.display_mode import (
    DisplayPreference,
    EffectiveMode,
    next_preference,
    resolve_mode,
    signal_from_prefers_dark,
)
from dashboard.services.preference_storage import PreferenceStorage
from dashboard.services.system_signal import Subscription, SystemSignalSource

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "themeMode"

ModeListener = Callable[[EffectiveMode], None]


def parse_preference(value: DisplayPreference | str | None) -> DisplayPreference:
    """Raises InvalidPreferenceError for anything outside system/light/dark."""
    if isinstance(value, DisplayPreference):
        return value
    try:
        return DisplayPreference(value)
    except ValueError:
        raise InvalidPreferenceError(value) from None


class DisplayModeResolver:
    def __init__(
        self,
        storage: PreferenceStorage,
        signal_source: SystemSignalSource,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ):
        self._storage = storage
        self._signal_source = signal_source
        self._storage_key = storage_key
        self._lock = threading.RLock()
        self._listeners: list[ModeListener] = []
        self._subscription: Subscription | None = None

        self._preference = DisplayPreference.SYSTEM
        self._system_signal = signal_from_prefers_dark(signal_source.prefers_dark())
        self._effective = resolve_mode(self._preference, self._system_signal)

    # ── Lifecycle ──────────────────────────────────
    def initialize(self) -> EffectiveMode:
        """
        Load the stored preference, sample the system signal and subscribe
        to its changes. Calling it again re-reads storage and the signal but
        keeps the existing subscription.
        """
        with self._lock:
            self._preference = self._load_preference()
            if self._subscription is None:
                self._subscription = self._signal_source.subscribe(self._on_source_notified)
            self._system_signal = signal_from_prefers_dark(self._signal_source.prefers_dark())
            self._effective = resolve_mode(self._preference, self._system_signal)
            logger.info(
                "Display mode initialized: preference=%s system=%s effective=%s",
                self._preference.value, self._system_signal.value, self._effective.value,
            )
            return self._effective

    def close(self) -> None:
        """Release the signal subscription. Safe to call more than once."""
        with self._lock:
            subscription, self._subscription = self._subscription, None
        if subscription is not None:
            subscription.unsubscribe()
            logger.debug("Display mode resolver released its system signal subscription")

    @property
    def subscribed(self) -> bool:
        return self._subscription is not None

    def __enter__(self) -> "DisplayModeResolver":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ── Reads ──────────────────────────────────────
    @property
    def preference(self) -> DisplayPreference:
        return self._preference

    @property
    def system_signal(self) -> EffectiveMode:
        return self._system_signal

    def get_effective_mode(self) -> EffectiveMode:
        return self._effective

    # ── Mutations ──────────────────────────────────
    def set_preference(self, value: DisplayPreference | str) -> EffectiveMode:
        preference = parse_preference(value)
        with self._lock:
            # Persist first: if the write fails, in-memory state is untouched.
            self._storage.set(self._storage_key, preference.value)
            self._preference = preference
            self._effective = resolve_mode(self._preference, self._system_signal)
            logger.info(
                "Display preference set to %s (effective=%s)",
                preference.value, self._effective.value,
            )
            self._notify()
            return self._effective

    def cycle(self) -> EffectiveMode:
        """Advance system -> light -> dark -> system."""
        with self._lock:
            return self.set_preference(next_preference(self._preference))

    def on_system_signal_changed(self, signal: EffectiveMode | str | bool) -> None:
        """
        Apply a new system signal. ``True``/``False`` are read as
        prefers-dark. Only affects the effective mode while following the system.
        """
        new_signal = (
            signal_from_prefers_dark(signal) if isinstance(signal, bool) else EffectiveMode(signal)
        )
        with self._lock:
            self._system_signal = new_signal
            logger.debug("System signal now %s", new_signal.value)
            if self._preference is not DisplayPreference.SYSTEM:
                return
            self._effective = resolve_mode(self._preference, self._system_signal)
            self._notify()

    def _on_source_notified(self, _prefers_dark: bool) -> None:
        # Notifications can arrive out of order from concurrent reports, so the
        # source is re-sampled under the lock instead of trusting the payload.
        with self._lock:
            current = signal_from_prefers_dark(self._signal_source.prefers_dark())
            if current is self._system_signal:
                return
            self.on_system_signal_changed(current)

    # ── Observers ──────────────────────────────────
    def add_listener(self, listener: ModeListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: ModeListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # ── Internal ───────────────────────────────────
    def _load_preference(self) -> DisplayPreference:
        stored = self._storage.get(self._storage_key)
        try:
            return DisplayPreference(stored)
        except ValueError:
            if stored is not None:
                logger.warning("Ignoring invalid stored display preference %r", stored)
            return DisplayPreference.SYSTEM

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._effective)
            except Exception:
                logger.exception("Display mode listener %r failed", listener)
