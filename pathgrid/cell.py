"""
Cell module: a single addressable grid position and its display state.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

CellId = Tuple[int, int]


class Role(Enum):
    """What the user painted on a cell."""

    EMPTY = "empty"
    START = "start"
    END = "end"
    WALL = "wall"


class Mark(Enum):
    """Transient annotation left by a search."""

    NONE = "none"
    VISITED = "visited"
    PATH = "path"


def cell_key(cell_id: CellId) -> str:
    """Encode an (x, y) id as its "x,y" string form."""
    return f"{cell_id[0]},{cell_id[1]}"


def parse_cell_key(key: str) -> CellId:
    """Decode an "x,y" string back into an (x, y) id."""
    parts = key.split(",")
    if len(parts) != 2:
        raise ValueError(f"Malformed cell key: {key!r}")
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(f"Malformed cell key: {key!r}") from None


@dataclass(frozen=True)
class CellSnapshot:
    """Read-only copy of a cell's state handed to callers."""

    id: CellId
    role: Role
    mark: Mark
    passable: bool
    is_frame: bool


class Cell:
    """Grid position with its role, search mark and outgoing edges."""

    def __init__(self, cell_id: CellId) -> None:
        self.id = cell_id
        # Outgoing edges: neighbor id -> Euclidean distance
        self.neighbors: Dict[CellId, float] = {}
        self.role = Role.EMPTY
        self.mark = Mark.NONE
        self.passable = True
        self.is_frame = False

    def __repr__(self):
        return (
            f"<Cell {cell_key(self.id)} role={self.role.value} "
            f"mark={self.mark.value} passable={self.passable}>"
        )

    @property
    def x(self) -> int:
        return self.id[0]

    @property
    def y(self) -> int:
        return self.id[1]

    def set_role(self, role: Role) -> None:
        self.role = role

    def set_mark(self, mark: Mark) -> None:
        self.mark = mark

    def get_mark(self) -> Mark:
        return self.mark

    def set_passable(self, passable: bool) -> None:
        self.passable = passable

    def is_passable(self) -> bool:
        return self.passable

    def set_is_frame(self, is_frame: bool) -> None:
        self.is_frame = is_frame

    def get_is_frame(self) -> bool:
        return self.is_frame

    def snapshot(self) -> CellSnapshot:
        """Return an immutable copy of this cell's state."""
        return CellSnapshot(
            id=self.id,
            role=self.role,
            mark=self.mark,
            passable=self.passable,
            is_frame=self.is_frame,
        )
