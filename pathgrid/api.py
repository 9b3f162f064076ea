"""
Functional interface to the grid core, used by the editor and any other host.
"""

from __future__ import annotations
from typing import List, Optional

from .cell import CellId, CellSnapshot, Mark, Role
from .frontier import HeapFrontier, ScanFrontier
from .grid import Grid


def new_grid(width: int, height: int) -> Grid:
    """Build a fresh grid; both dimensions must be at least 3."""
    return Grid(width, height)


def set_cell_role(grid: Grid, cell_id: CellId, role: Role) -> None:
    """
    Paint role on a cell and keep its passability in line with it.
    Frame cells are never repainted. Start/end uniqueness is the caller's job.
    """
    cell = grid.get_cell(cell_id)
    if cell.get_is_frame():
        return
    cell.set_role(role)
    # A painted role replaces whatever the last search drew there
    cell.set_mark(Mark.NONE)
    cell.set_passable(role != Role.WALL)


def set_cell_passable(grid: Grid, cell_id: CellId, passable: bool) -> None:
    cell = grid.get_cell(cell_id)
    if cell.get_is_frame():
        return
    cell.set_passable(passable)


def get_cell(grid: Grid, cell_id: CellId) -> CellSnapshot:
    return grid.get_cell(cell_id).snapshot()


def all_cells(grid: Grid) -> List[CellSnapshot]:
    """Snapshots of every cell in construction (row-major) order."""
    return [cell.snapshot() for cell in grid.cells.values()]


def find_path(
    grid: Grid, start_id: CellId, end_id: CellId, heap: bool = False
) -> Optional[List[CellId]]:
    """
    Clear earlier marks, search from start_id to end_id and mark the path.
    heap: use the binary-heap frontier instead of the linear scan.
    Returns the path ids, or None if end is unreachable.
    """
    grid.clear()
    frontier = HeapFrontier() if heap else ScanFrontier()
    path = grid.a_star(start_id, end_id, frontier=frontier)
    if path is not None:
        grid.mark_path(path)
    return path


def clear_marks(grid: Grid) -> None:
    grid.clear()
