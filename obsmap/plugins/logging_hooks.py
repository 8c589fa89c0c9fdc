# obsmap/plugins/logging_hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Any, Dict, Optional

from obsmap.core.config import NotificationHooks, default_registry


def log_events(host: Any, config: Optional[Dict[str, Any]] = None) -> None:
    """
    Extension that logs every emitted event before handing it to the hooks
    that were active when it was applied.

    Recognised config keys: ``registry``, ``logger`` and ``level``.
    """
    config = config or {}
    registry = config.get("registry", default_registry)
    log = config.get("logger") or logging.getLogger("obsmap.events")
    level = config.get("level", logging.DEBUG)
    current = registry.hooks

    def emit(target: Any, event_name: str, payload: Any) -> None:
        log.log(level, "%s %r on %r", event_name, getattr(payload, "key", None), target)
        current.emit(target, event_name, payload)

    registry.configure(
        NotificationHooks(
            emit=emit,
            on=current.on,
            remove_listener=current.remove_listener,
            remove_all_listeners=current.remove_all_listeners,
        )
    )
