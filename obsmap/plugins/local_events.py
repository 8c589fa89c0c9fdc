# obsmap/plugins/local_events.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import weakref
from typing import Any, Dict, List, Optional

from obsmap.core.config import NotificationHooks, default_registry
from obsmap.core.extensions import extend
from obsmap.interfaces.types import Listener


class LocalEmitter:
    """
    In-process event emitter backing the four notification hooks. Listeners
    are kept per container and dropped with it.
    """

    def __init__(self) -> None:
        self._listeners: "weakref.WeakKeyDictionary[Any, Dict[str, List[Listener]]]" = weakref.WeakKeyDictionary()

    def emit(self, target: Any, event_name: str, payload: Any) -> None:
        listeners = self._listeners.get(target, {}).get(event_name, [])
        # Snapshot, so listeners may unsubscribe while being called.
        for listener in list(listeners):
            listener(payload)

    def on(self, target: Any, event_name: str, listener: Listener) -> None:
        self._listeners.setdefault(target, {}).setdefault(event_name, []).append(listener)

    def remove_listener(self, target: Any, event_name: str, listener: Listener) -> None:
        listeners = self._listeners.get(target, {}).get(event_name)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def remove_all_listeners(self, target: Any) -> None:
        self._listeners.pop(target, None)

    def listener_count(self, target: Any, event_name: str) -> int:
        return len(self._listeners.get(target, {}).get(event_name, []))

    def hooks(self) -> NotificationHooks:
        return NotificationHooks(
            emit=self.emit,
            on=self.on,
            remove_listener=self.remove_listener,
            remove_all_listeners=self.remove_all_listeners,
        )


def _on(self, event_name: str, listener: Listener) -> Any:
    """Subscribe ``listener`` to ``event_name`` events of this container."""
    self.config.on(self, event_name, listener)
    return self


def _remove_listener(self, event_name: str, listener: Listener) -> Any:
    """Unsubscribe ``listener`` from ``event_name`` events of this container."""
    self.config.remove_listener(self, event_name, listener)
    return self


def local_events(host: Any, config: Optional[Dict[str, Any]] = None) -> None:
    """
    Extension wiring containers to a LocalEmitter.

    Recognised config keys: ``registry`` (defaults to the process-wide one)
    and ``emitter`` (defaults to a new LocalEmitter).
    """
    config = config or {}
    registry = config.get("registry", default_registry)
    emitter = config.get("emitter") or LocalEmitter()
    if isinstance(host, type):
        extend(host, on=_on, remove_listener=_remove_listener)
    registry.configure(emitter.hooks())
