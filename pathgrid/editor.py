"""
Editor module: painting state between the input layer and the grid core.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import List, Optional

from . import api
from .cell import CellId, Role, cell_key
from .grid import Grid

logger = logging.getLogger(__name__)


class Tool(Enum):
    START = "start"
    END = "end"
    WALL = "wall"
    ERASER = "eraser"


class Editor:
    """
    Tracks the selected tool, the mouse button and the single start/end cells,
    and applies paint strokes to the grid.
    """

    def __init__(self, cols: int, rows: int, heap: bool = False) -> None:
        self.cols = cols
        self.rows = rows
        # Use the heap frontier for searches
        self.heap = heap
        self.grid: Grid = api.new_grid(cols, rows)
        self.tool: Optional[Tool] = None
        self.mouse_down = False
        self.start_id: Optional[CellId] = None
        self.end_id: Optional[CellId] = None
        # Bumped on every visible change so the view knows to redraw
        self.version = 0
        self.last_path: Optional[List[CellId]] = None

    def select_tool(self, tool: Tool) -> None:
        self.tool = tool

    def _touch(self) -> None:
        self.version += 1

    def press(self, cell_id: CellId) -> None:
        """Mouse button pressed over a cell: place start or end."""
        self.mouse_down = True
        cell = self.grid.get_cell(cell_id)
        if cell.get_is_frame():
            return
        if self.tool == Tool.START and self.start_id is None:
            self._forget(cell_id)
            api.set_cell_role(self.grid, cell_id, Role.START)
            self.start_id = cell_id
        elif self.tool == Tool.END and self.end_id is None:
            self._forget(cell_id)
            api.set_cell_role(self.grid, cell_id, Role.END)
            self.end_id = cell_id
        else:
            return
        self._sync_grid_ids()
        self._touch()

    def place(self, tool: Tool, cell_id: CellId) -> None:
        """Click a cell with tool, keeping the currently selected tool."""
        selected = self.tool
        self.tool = tool
        self.press(cell_id)
        self.release()
        self.tool = selected

    def drag(self, cell_id: CellId) -> None:
        """Mouse moved over a cell: paint walls or erase while held down."""
        if not self.mouse_down:
            return
        cell = self.grid.get_cell(cell_id)
        if cell.get_is_frame():
            return
        api.clear_marks(self.grid)
        if self.tool == Tool.ERASER:
            self._forget(cell_id)
            api.set_cell_role(self.grid, cell_id, Role.EMPTY)
        elif self.tool == Tool.WALL:
            self._forget(cell_id)
            api.set_cell_role(self.grid, cell_id, Role.WALL)
        self._sync_grid_ids()
        self._touch()

    def release(self) -> None:
        self.mouse_down = False

    def _forget(self, cell_id: CellId) -> None:
        if cell_id == self.start_id:
            self.start_id = None
        if cell_id == self.end_id:
            self.end_id = None

    def _sync_grid_ids(self) -> None:
        self.grid.start_id = self.start_id
        self.grid.end_id = self.end_id

    def run(self) -> Optional[List[CellId]]:
        """Search from the painted start to the painted end and mark the path."""
        if self.start_id is None or self.end_id is None:
            logger.warning("Cannot search: place both a start and an end cell")
            return None
        self.last_path = api.find_path(
            self.grid, self.start_id, self.end_id, heap=self.heap
        )
        if self.last_path is None:
            logger.info(
                "No path from %s to %s",
                cell_key(self.start_id),
                cell_key(self.end_id),
            )
        self._touch()
        return self.last_path

    def reset(self) -> None:
        """Replace the grid with a fresh one and forget start and end."""
        self.grid = api.new_grid(self.cols, self.rows)
        self.start_id = None
        self.end_id = None
        self.last_path = None
        self.version = 0
        logger.info("Grid reset to %dx%d", self.cols, self.rows)
