# obsmap/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""obsmap: an observable key/value container with pluggable notification hooks."""

from obsmap.core.config import ConfigRegistry, HookConfig, NotificationHooks, configure, default_registry
from obsmap.core.container import ObservableMap
from obsmap.core.errors import ConfigurationError, DisposedError, ExtensionError, ObsMapError
from obsmap.core.events import MutationEvent, MutationType
from obsmap.core.extensions import ExtensionRegistry, default_extensions, extend, use

__version__ = "0.1.0"

__all__ = [
    "ConfigRegistry",
    "ConfigurationError",
    "DisposedError",
    "ExtensionError",
    "ExtensionRegistry",
    "HookConfig",
    "MutationEvent",
    "MutationType",
    "NotificationHooks",
    "ObsMapError",
    "ObservableMap",
    "configure",
    "default_extensions",
    "default_registry",
    "extend",
    "use",
]
