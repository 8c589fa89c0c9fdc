# obsmap/core/config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Mapping, Union

from obsmap.core.errors import ConfigurationError
from obsmap.interfaces.types import ClearHook, EmitHook, SubscribeHook
from obsmap.runtime.concurrency import get_lock, with_lock

logger = logging.getLogger(__name__)


def _noop(*args: Any) -> None:
    return None


@dataclass(frozen=True)
class NotificationHooks:
    """
    The four functions a container delegates all observability to. Every hook
    receives the container it acts on as its first argument.
    """

    emit: EmitHook = _noop
    on: SubscribeHook = _noop
    remove_listener: SubscribeHook = _noop
    remove_all_listeners: ClearHook = _noop

    @classmethod
    def from_mapping(cls, hooks: Mapping[str, Callable[..., Any]]) -> "NotificationHooks":
        """
        Build a hook set from a mapping that names exactly the four hooks.

        :raises ConfigurationError: If a hook is missing, unknown, or not callable.
        """
        names = set(HOOK_NAMES)
        missing = names.difference(hooks)
        unknown = set(hooks).difference(names)
        if missing:
            raise ConfigurationError(f"Missing notification hooks: {', '.join(sorted(missing))}")
        if unknown:
            raise ConfigurationError(f"Unknown notification hooks: {', '.join(sorted(unknown))}")
        return cls(**dict(hooks))

    def __post_init__(self) -> None:
        for name in HOOK_NAMES:
            if not callable(getattr(self, name)):
                raise ConfigurationError(f"Notification hook '{name}' must be callable")

    def as_dict(self) -> Dict[str, Callable[..., Any]]:
        return {name: getattr(self, name) for name in HOOK_NAMES}


HOOK_NAMES = tuple(f.name for f in fields(NotificationHooks))


class _HookSource:
    """
    Shared attribute surface for anything a container can resolve hooks
    through. Subclasses implement ``resolve``; lookups happen on every access
    so a reconfigure reaches containers that already exist.
    """

    def resolve(self, name: str) -> Callable[..., Any]:
        raise NotImplementedError()

    @property
    def emit(self) -> EmitHook:
        return self.resolve("emit")

    @property
    def on(self) -> SubscribeHook:
        return self.resolve("on")

    @property
    def remove_listener(self) -> SubscribeHook:
        return self.resolve("remove_listener")

    @property
    def remove_all_listeners(self) -> ClearHook:
        return self.resolve("remove_all_listeners")

    def derive(self, **overrides: Callable[..., Any]) -> "HookConfig":
        """
        Layer a subset of hooks over this source without touching it.
        """
        return HookConfig(self, **overrides)


class ConfigRegistry(_HookSource):
    """
    Holds the active hook set for every container built against it. The set
    is only ever replaced wholesale through ``configure``.
    """

    def __init__(self, hooks: NotificationHooks = None) -> None:
        self._hooks = hooks or NotificationHooks()
        self._lock = get_lock()

    @property
    def hooks(self) -> NotificationHooks:
        return self._hooks

    def configure(self, hooks: Union[NotificationHooks, Mapping[str, Callable[..., Any]]]) -> None:
        """
        Replace the active hook set. No partial merge happens: callers must
        supply all four hooks.

        :param hooks: A NotificationHooks instance or a mapping naming all four hooks.
        :raises ConfigurationError: If the hook set is incomplete or invalid.
        """
        if not isinstance(hooks, NotificationHooks):
            if not isinstance(hooks, Mapping):
                raise ConfigurationError(f"Cannot configure from {type(hooks).__name__}")
            hooks = NotificationHooks.from_mapping(hooks)
        with with_lock(self._lock):
            self._hooks = hooks
        logger.debug("Configured notification hooks: %s", hooks)

    def reset(self) -> None:
        """Restore the no-op hook set."""
        self.configure(NotificationHooks())

    def resolve(self, name: str) -> Callable[..., Any]:
        return getattr(self._hooks, name)


class HookConfig(_HookSource):
    """
    A hook source layered over a parent source. Hooks given as overrides win;
    everything else is looked up on the parent at call time.
    """

    def __init__(self, parent: _HookSource, **overrides: Callable[..., Any]) -> None:
        unknown = set(overrides).difference(HOOK_NAMES)
        if unknown:
            raise ConfigurationError(f"Unknown notification hooks: {', '.join(sorted(unknown))}")
        for name, hook in overrides.items():
            if not callable(hook):
                raise ConfigurationError(f"Notification hook '{name}' must be callable")
        self._parent = parent
        self._overrides = dict(overrides)

    @property
    def parent(self) -> _HookSource:
        return self._parent

    def resolve(self, name: str) -> Callable[..., Any]:
        if name in self._overrides:
            return self._overrides[name]
        return self._parent.resolve(name)


default_registry = ConfigRegistry()


def configure(hooks: Union[NotificationHooks, Mapping[str, Callable[..., Any]]]) -> None:
    """Replace the process-wide hook set used by containers built without an explicit registry."""
    default_registry.configure(hooks)
