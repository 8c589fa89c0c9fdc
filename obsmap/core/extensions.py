# obsmap/core/extensions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
import weakref
from typing import Any, Optional, Set, TypeVar

from obsmap.core.errors import ExtensionError
from obsmap.interfaces.types import Extension
from obsmap.runtime.concurrency import get_lock, with_lock

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


def _host_key(target: Any) -> type:
    """Extensions are recorded against a host's type, not against instances."""
    return target if isinstance(target, type) else type(target)


class ExtensionRegistry:
    """
    Records which extensions have been applied to which host types, so that
    each (extension, host type) pair is applied at most once.

    The registry knows nothing about containers: any object can act as a host.
    Records live as long as the host type does.
    """

    def __init__(self) -> None:
        self._applied: "weakref.WeakKeyDictionary[type, Set[Extension]]" = weakref.WeakKeyDictionary()
        # Re-entrant: an extension may apply other extensions while being applied.
        self._lock = get_lock(reentrant=True)

    def is_applied(self, target: Any, extension: Extension) -> bool:
        return extension in self._applied.get(_host_key(target), ())

    def apply(self, target: T, extension: Extension, config: Optional[Any] = None) -> T:
        """
        Call ``extension(target, config)`` unless it was already applied to
        ``target``'s host type.

        :param target: The host object (usually a class) to extend.
        :param extension: A callable taking the host and an optional config.
        :param config: Passed through to the extension untouched.
        :return: ``target``, so calls can be chained.
        :raises ExtensionError: If ``extension`` is not callable.
        """
        if not callable(extension):
            raise ExtensionError(f"Extension {extension!r} is not callable")

        with with_lock(self._lock):
            if self.is_applied(target, extension):
                logger.debug("Extension %r already applied to %r", extension, _host_key(target))
                return target
            extension(target, config)
            self._applied.setdefault(_host_key(target), set()).add(extension)
        logger.debug("Applied extension %r to %r", extension, _host_key(target))
        return target


def extend(host: type, **members: Any) -> type:
    """
    Add members to a host class. An attribute the host already defines is
    only replaced by an identical object.

    :raises ExtensionError: If a member would overwrite a different existing attribute.
    """
    for name, member in members.items():
        existing = getattr(host, name, _MISSING)
        if existing is not _MISSING and existing is not member:
            raise ExtensionError(f"{host.__name__} already defines '{name}'")
    for name, member in members.items():
        setattr(host, name, member)
    return host


default_extensions = ExtensionRegistry()


def use(target: T, extension: Extension, config: Optional[Any] = None) -> T:
    """Apply ``extension`` to ``target`` through the process-wide registry."""
    return default_extensions.apply(target, extension, config)
