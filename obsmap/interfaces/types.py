# obsmap/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, Optional

EventName = str

# Hook Types
EmitHook = Callable[[Any, EventName, Any], None]
SubscribeHook = Callable[[Any, EventName, Callable[..., Any]], None]
ClearHook = Callable[[Any], None]
Listener = Callable[[Any], None]

# Extension Types
Extension = Callable[[Any, Optional[Any]], None]
