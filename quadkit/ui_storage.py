"""Per-widget state storage and drag-and-drop state for the immediate mode UI."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterator, TypeVar

from .primitives import Vec2

T = TypeVar("T")

_MISSING = object()


class AnyStorage:
    """Keeps one value of any type per widget id, created on first use."""

    def __init__(self) -> None:
        self._storage: dict[int, Any] = {}

    def get_or_insert_with(self, id: int, factory: Callable[[], T]) -> T:
        """The value stored under id, created by factory if there is none yet."""
        if id not in self._storage:
            self._storage[id] = factory()
        return self._storage[id]

    def get_or_default(self, id: int, kind: type[T]) -> T:
        """The value stored under id, created as kind() if there is none yet.

        Raises TypeError when the stored value is not of the requested kind.
        """
        value = self._storage.get(id, _MISSING)
        if value is _MISSING:
            value = kind()
            self._storage[id] = value
        if not isinstance(value, kind):
            raise TypeError(
                f"value stored under {id} is {type(value).__name__}, not {kind.__name__}"
            )
        return value

    def __getitem__(self, id: int) -> Any:
        return self._storage[id]

    def __setitem__(self, id: int, value: Any) -> None:
        self._storage[id] = value

    def __contains__(self, id: object) -> bool:
        return id in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[int]:
        return iter(self._storage)


class DragPhase(enum.Enum):
    """Whether a drag has only been clicked or is being dragged."""

    CLICKED = "clicked"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class DragState:
    """The phase of a drag and the point it is anchored to."""

    phase: DragPhase
    position: Vec2

    @classmethod
    def clicked(cls, position: Vec2) -> DragState:
        return cls(DragPhase.CLICKED, position)

    @classmethod
    def dragging(cls, position: Vec2) -> DragState:
        return cls(DragPhase.DRAGGING, position)


class DragKind(enum.Enum):
    """What a draggable widget reports this frame."""

    NO = "no"
    DRAGGING = "dragging"
    DROPPED = "dropped"


@dataclass(frozen=True)
class Drag:
    """The outcome of a drag: nothing, still dragging, or dropped onto a target."""

    kind: DragKind = DragKind.NO
    position: Vec2 | None = None
    target: int | None = None

    @classmethod
    def no(cls) -> Drag:
        return cls(DragKind.NO)

    @classmethod
    def dragging(cls, position: Vec2, target: int | None = None) -> Drag:
        return cls(DragKind.DRAGGING, position, target)

    @classmethod
    def dropped(cls, position: Vec2, target: int | None = None) -> Drag:
        return cls(DragKind.DROPPED, position, target)