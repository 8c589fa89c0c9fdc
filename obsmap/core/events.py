# obsmap/core/events.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class MutationType(str, Enum):
    """
    The kinds of committed mutation a container reports. The value doubles as
    the event name handed to the ``emit`` hook.
    """

    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class MutationEvent:
    """
    Payload emitted for every committed mutation of a container.

    :param type: Either ``"add"`` or ``"remove"``.
    :param target: The container that changed.
    :param key: The (already string-coerced) key that changed.
    :param element: The value that was added, or the value that was removed.
    """

    type: MutationType
    target: Any
    key: str
    element: Any

    @property
    def name(self) -> str:
        """The event name this payload is emitted under."""
        return self.type.value

    def as_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "target": self.target, "key": self.key, "element": self.element}
