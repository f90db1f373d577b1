from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional


EventType = Literal[
    "key_down",
    "quit",
]


@dataclass(frozen=True)
class InputEvent:
    event_type: EventType
    timestamp: float
    key: Optional[str] = None
