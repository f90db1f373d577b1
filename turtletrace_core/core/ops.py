from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, TypeAlias


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class SetColor:
    r: int
    g: int
    b: int


DrawOp: TypeAlias = MoveTo | LineTo | SetColor


class OpLog:
    """Append-only record of drawing operations in issue order."""

    def __init__(self) -> None:
        self._ops: list[DrawOp] = []

    def append(self, op: DrawOp) -> None:
        if not isinstance(op, (MoveTo, LineTo, SetColor)):
            raise TypeError(f"unsupported drawing operation: {op!r}")
        self._ops.append(op)

    def __iter__(self) -> Iterator[DrawOp]:
        return iter(self._ops)

    def __len__(self) -> int:
        return len(self._ops)
