# obsmap/core/container.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from collections import ChainMap
from typing import Any, Callable, Dict, Iterator, Mapping, MutableMapping, Optional, Union

from obsmap.core.config import ConfigRegistry, NotificationHooks, _HookSource, default_registry
from obsmap.core.errors import DisposedError
from obsmap.core.events import MutationEvent, MutationType
from obsmap.core.extensions import default_extensions
from obsmap.interfaces.types import Extension

logger = logging.getLogger(__name__)

# Values of these types are identical when they compare equal.
_SCALAR_TYPES = (str, bytes, int, float, complex, bool, type(None))


def _identical(old: Any, new: Any) -> bool:
    """
    Strict equality: the same object, or equal scalars of exactly the same
    type. ``0`` and ``"0"``, ``1`` and ``True`` or two equal lists are distinct.
    NaN is never identical to anything, itself included.
    """
    if isinstance(old, (float, complex)) and old != old:
        return False
    if old is new:
        return True
    return type(old) is type(new) and isinstance(old, _SCALAR_TYPES) and old == new


def _own(elements: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """
    The part of a mapping that holds own entries. A ChainMap's parent maps
    are treated as inherited defaults and never count as own.
    """
    if isinstance(elements, ChainMap):
        return elements.maps[0]
    return elements


class ObservableMap:
    """
    A string-keyed store that reports every committed insertion, replacement
    and removal through its notification hooks.

    Hooks are resolved through ``config`` on every operation. By default that
    is the registry the container was built with; assign
    ``container.config = container.config.derive(...)`` to override a subset
    of hooks for this one container.
    """

    def __init__(
        self,
        initial: Optional[MutableMapping[str, Any]] = None,
        registry: Optional[ConfigRegistry] = None,
    ) -> None:
        """
        Create a container.

        :param initial: Mapping to use as the internal storage. It is aliased,
            not copied: changes made through either side are visible to both.
        :param registry: Hook registry to resolve through. Defaults to the
            process-wide registry.
        """
        self._elements: Optional[MutableMapping[str, Any]] = {} if initial is None else initial
        self.config: _HookSource = registry if registry is not None else default_registry

    # -------------------------------------------------------------------------
    # Host-level shortcuts
    # -------------------------------------------------------------------------

    @classmethod
    def configure(cls, hooks: Union[NotificationHooks, Mapping[str, Callable[..., Any]]]) -> None:
        """Replace the process-wide hook set."""
        default_registry.configure(hooks)

    @classmethod
    def use(cls, extension: Extension, config: Optional[Any] = None) -> type:
        """Apply an extension to this class once. Returns the class."""
        return default_extensions.apply(cls, extension, config)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @property
    def disposed(self) -> bool:
        return self._elements is None

    def to_object(self) -> Optional[MutableMapping[str, Any]]:
        """Return the internal mapping itself. Writes to it bypass notification."""
        return self._elements

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        if self._elements is None:
            return None
        return _own(self._elements).get(str(key))

    def get_all(self) -> Dict[str, Any]:
        """Return a new dict holding every own entry."""
        if self._elements is None:
            return {}
        return {key: self.get(key) for key in list(_own(self._elements))}

    def has(self, key: Any) -> bool:
        """True if ``key`` is an own entry, whatever its value."""
        if self._elements is None:
            return False
        return str(key) in _own(self._elements)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def set(self, key: Any, value: Any) -> "ObservableMap":
        """
        Store ``value`` under ``key``.

        Storing a value identical to the current one does nothing. Replacing a
        value emits ``remove`` with the old value, then ``add``. A fresh key
        only emits ``add``.
        """
        elements = self._writable()
        key = str(key)
        own = _own(elements)

        if key in own:
            old = own[key]
            if _identical(old, value):
                return self
            self._emit(MutationType.REMOVE, key, old)

        elements[key] = value
        self._emit(MutationType.ADD, key, value)
        return self

    def set_all(self, mapping: Mapping[Any, Any]) -> "ObservableMap":
        """Call ``set`` for every item of ``mapping`` in iteration order."""
        for key, value in mapping.items():
            self.set(key, value)
        return self

    def remove(self, key: Any) -> "ObservableMap":
        """Delete ``key`` and emit ``remove``. Absent keys are ignored."""
        elements = self._writable()
        key = str(key)
        own = _own(elements)

        if key not in own:
            return self

        old = own.pop(key)
        self._emit(MutationType.REMOVE, key, old)
        return self

    def dispose(self) -> None:
        """
        Drop every listener and release the internal mapping. Reads on a
        disposed container see no entries; writes raise DisposedError.
        """
        if self._elements is None:
            return
        self.config.remove_all_listeners(self)
        self._elements = None
        logger.debug("Disposed %r", self)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _writable(self) -> MutableMapping[str, Any]:
        if self._elements is None:
            raise DisposedError(f"{type(self).__name__} has been disposed")
        return self._elements

    def _emit(self, kind: MutationType, key: str, element: Any) -> None:
        event = MutationEvent(type=kind, target=self, key=key, element=element)
        self.config.emit(self, event.name, event)

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[str]:
        if self._elements is None:
            return iter(())
        return iter(list(_own(self._elements)))

    def __len__(self) -> int:
        if self._elements is None:
            return 0
        return len(_own(self._elements))

    def __repr__(self) -> str:
        if self._elements is None:
            return f"<{type(self).__name__} disposed>"
        return f"<{type(self).__name__} {len(self)} entries>"
