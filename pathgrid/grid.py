"""
Grid graph: owns every cell, builds 8-way adjacency once, and runs A* search.
"""

from __future__ import annotations
import math
import logging
from typing import Dict, Iterable, List, Optional, Set

from .cell import Cell, CellId, Mark, Role, cell_key
from .config import MIN_GRID_SIZE
from .frontier import ScanFrontier

logger = logging.getLogger(__name__)

# Neighbor offsets in the order edges are stored: W, E, N, S, SW, SE, NW, NE
NEIGHBOR_OFFSETS = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, 1),
    (1, 1),
    (-1, -1),
    (1, -1),
)


class UnknownCellId(KeyError):
    """Raised when an id does not name a cell of the grid."""

    def __init__(self, cell_id) -> None:
        super().__init__(cell_id)
        self.cell_id = cell_id

    def __str__(self):
        return f"Cell {self.cell_id!r} is not part of the grid"


def heuristic(a: CellId, b: CellId) -> int:
    """Manhattan distance heuristic for grid."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def reconstruct_path(
    came_from: Dict[CellId, CellId], current: CellId
) -> List[CellId]:
    """Walk predecessors back from current; return ids from start to current."""
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


class Grid:
    """Rectangular grid graph with an impassable border frame."""

    def __init__(self, width: int, height: int) -> None:
        if width < MIN_GRID_SIZE or height < MIN_GRID_SIZE:
            raise ValueError(
                f"Grid must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, "
                f"got {width}x{height}"
            )
        self.width = width
        self.height = height
        # Bookkeeping for callers; search takes explicit ids
        self.start_id: Optional[CellId] = None
        self.end_id: Optional[CellId] = None
        self.cells: Dict[CellId, Cell] = {}

        diagonal = math.sqrt(2)
        for y in range(height):
            for x in range(width):
                cell = Cell((x, y))
                if self.is_frame_position(x, y):
                    cell.set_passable(False)
                    cell.set_is_frame(True)
                for dx, dy in NEIGHBOR_OFFSETS:
                    nx, ny = x + dx, y + dy
                    if 0 <= nx < width and 0 <= ny < height:
                        cell.neighbors[(nx, ny)] = (
                            diagonal if dx and dy else 1.0
                        )
                self.cells[cell.id] = cell

    def __repr__(self):
        return f"<Grid {self.width}x{self.height}>"

    def is_frame_position(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies on the outer ring of the grid."""
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    def in_bounds(self, cell_id: CellId) -> bool:
        try:
            return cell_id in self.cells
        except TypeError:
            # Unhashable ids are never cell ids
            return False

    def get_cell(self, cell_id: CellId) -> Cell:
        """Return the cell for cell_id or raise UnknownCellId."""
        try:
            return self.cells[cell_id]
        except (KeyError, TypeError):
            raise UnknownCellId(cell_id) from None

    def heuristic(self, a: CellId, b: CellId) -> int:
        return heuristic(a, b)

    def reconstruct_path(
        self, came_from: Dict[CellId, CellId], current: CellId
    ) -> List[CellId]:
        return reconstruct_path(came_from, current)

    def a_star(
        self, start_id: CellId, end_id: CellId, frontier=None
    ) -> Optional[List[CellId]]:
        """
        Find a path from start_id to end_id using A*.
        frontier: empty open-set container (ScanFrontier when omitted).
        Cells newly added to the frontier are marked visited, except the
        start and end cells.
        Returns the ids from start to end inclusive, or None if no path exists.
        Raises UnknownCellId if either id is not part of the grid.
        """
        for cell_id in (start_id, end_id):
            if not self.in_bounds(cell_id):
                raise UnknownCellId(cell_id)

        open_set = frontier if frontier is not None else ScanFrontier()
        closed: Set[CellId] = set()
        # G cost from start to node
        g_score: Dict[CellId, float] = {start_id: 0.0}
        # G cost plus heuristic
        f_score: Dict[CellId, float] = {
            start_id: heuristic(start_id, end_id)
        }
        # For path reconstruction
        came_from: Dict[CellId, CellId] = {}
        open_set.insert_or_update(start_id, f_score[start_id])

        while open_set:
            current = open_set.extract_min()
            if current == end_id:
                path = reconstruct_path(came_from, current)
                logger.debug(
                    "Path %s -> %s found: %d steps, %d cells expanded",
                    cell_key(start_id),
                    cell_key(end_id),
                    len(path),
                    len(closed),
                )
                return path
            closed.add(current)

            for neighbor_id, weight in self.cells[current].neighbors.items():
                if weight <= 0 or neighbor_id in closed:
                    continue
                neighbor = self.cells[neighbor_id]
                # Walls and frame cells are never entered
                if not neighbor.is_passable():
                    continue
                tentative_g = g_score[current] + weight
                if (
                    neighbor_id not in g_score
                    or tentative_g < g_score[neighbor_id]
                ):
                    came_from[neighbor_id] = current
                    g_score[neighbor_id] = tentative_g
                    f_score[neighbor_id] = tentative_g + heuristic(
                        neighbor_id, end_id
                    )
                    is_new = neighbor_id not in open_set
                    open_set.insert_or_update(
                        neighbor_id, f_score[neighbor_id]
                    )
                    if is_new and neighbor_id not in (start_id, end_id):
                        neighbor.set_mark(Mark.VISITED)

        logger.debug(
            "No path %s -> %s: %d cells expanded",
            cell_key(start_id),
            cell_key(end_id),
            len(closed),
        )
        return None

    def mark_path(self, path: Iterable[CellId]) -> None:
        """Mark every cell on path as PATH, leaving start and end cells alone."""
        for cell_id in path:
            cell = self.get_cell(cell_id)
            if cell.role in (Role.START, Role.END):
                continue
            cell.set_mark(Mark.PATH)

    def clear(self) -> None:
        """Reset visited and path marks; roles are untouched."""
        for cell in self.cells.values():
            if cell.mark in (Mark.PATH, Mark.VISITED):
                cell.set_mark(Mark.NONE)
