"""
Pygame renderer: cell colours through a numpy buffer, glyphs and a tool bar on top.
"""

from __future__ import annotations
import logging
import numpy as np
import pygame
from typing import TYPE_CHECKING, Dict, Optional, Tuple

from .cell import CellId, CellSnapshot, Mark, Role
from .config import (
    BACKGROUND_COLOR,
    CELL_HEIGHT,
    CELL_TINT,
    CELL_WIDTH,
    EMPTY_COLOR,
    END_CHAR,
    END_COLOR,
    FONT_SIZE,
    FRAME_COLOR,
    FRAME_CORNER_CHAR,
    FRAME_HORIZONTAL_CHAR,
    FRAME_VERTICAL_CHAR,
    PATH_CHAR,
    PATH_COLOR,
    START_CHAR,
    START_COLOR,
    TOOLBAR_HEIGHT,
    TOOLBAR_TEXT_COLOR,
    VISITED_CHAR,
    VISITED_COLOR,
    WALL_CHAR,
    WALL_COLOR,
)

if TYPE_CHECKING:
    from .editor import Editor
    from .grid import Grid

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


def cell_glyph(cell: CellSnapshot, width: int, height: int) -> str:
    """Character shown in a cell; frame cells draw the box border."""
    x, y = cell.id
    if cell.is_frame:
        on_x_edge = x in (0, width - 1)
        on_y_edge = y in (0, height - 1)
        if on_x_edge and on_y_edge:
            return FRAME_CORNER_CHAR
        if on_x_edge:
            return FRAME_VERTICAL_CHAR
        return FRAME_HORIZONTAL_CHAR
    if cell.role == Role.START:
        return START_CHAR
    if cell.role == Role.END:
        return END_CHAR
    if cell.role == Role.WALL:
        return WALL_CHAR
    if cell.mark == Mark.PATH:
        return PATH_CHAR
    if cell.mark == Mark.VISITED:
        return VISITED_CHAR
    return " "


def cell_color(cell: CellSnapshot) -> Color:
    """Foreground colour of a cell's glyph."""
    if cell.is_frame:
        return FRAME_COLOR
    if cell.role == Role.START:
        return START_COLOR
    if cell.role == Role.END:
        return END_COLOR
    if cell.role == Role.WALL:
        return WALL_COLOR
    if cell.mark == Mark.PATH:
        return PATH_COLOR
    if cell.mark == Mark.VISITED:
        return VISITED_COLOR
    return EMPTY_COLOR


def color_buffer(grid: Grid) -> np.ndarray:
    """
    Background colour per cell as a (width, height, 3) uint8 array, indexed
    [x, y] to match pygame.surfarray. Frame cells stay background coloured;
    other cells get a dimmed copy of their glyph colour.
    """
    buf = np.empty((grid.width, grid.height, 3), dtype=np.uint8)
    buf[:, :] = BACKGROUND_COLOR
    for cell in grid.cells.values():
        if cell.get_is_frame():
            continue
        color = np.array(cell_color(cell.snapshot()), dtype=np.float32)
        buf[cell.x, cell.y] = (color * CELL_TINT).astype(np.uint8)
    return buf


class Renderer:
    """Draws the grid and the tool bar onto a Pygame surface."""

    def __init__(
        self,
        cols: int,
        rows: int,
        cell_width: int = CELL_WIDTH,
        cell_height: int = CELL_HEIGHT,
    ) -> None:
        self.cols = cols
        self.rows = rows
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.grid_width = cols * cell_width
        self.grid_height = rows * cell_height
        pygame.font.init()
        self.font = pygame.font.SysFont(None, FONT_SIZE)
        # Rendered glyph surfaces keyed by (char, colour)
        self._glyphs: Dict[Tuple[str, Color], pygame.Surface] = {}
        self._version: Optional[int] = None
        self._grid: Optional[Grid] = None
        self._background: Optional[pygame.Surface] = None

    @property
    def size(self) -> Tuple[int, int]:
        """Window size needed for the grid plus the tool bar."""
        return (self.grid_width, self.grid_height + TOOLBAR_HEIGHT)

    def cell_at(self, pos: Tuple[int, int]) -> Optional[CellId]:
        """Map a pixel position to the id of the cell under it, or None."""
        px, py = pos
        if px < 0 or py < 0 or px >= self.grid_width or py >= self.grid_height:
            return None
        return (px // self.cell_width, py // self.cell_height)

    def _glyph(self, char: str, color: Color) -> pygame.Surface:
        key = (char, color)
        surf = self._glyphs.get(key)
        if surf is None:
            surf = self.font.render(char, True, color)
            self._glyphs[key] = surf
        return surf

    def render(self, screen: pygame.Surface, editor: Editor) -> None:
        """Render the entire scene."""
        grid = editor.grid
        screen.fill(BACKGROUND_COLOR)
        # Rebuild the colour layer only when the editor reports a change
        if (
            self._background is None
            or self._grid is not grid
            or self._version != editor.version
        ):
            small = pygame.surfarray.make_surface(color_buffer(grid))
            self._background = pygame.transform.scale(
                small, (self.grid_width, self.grid_height)
            )
            self._grid = grid
            self._version = editor.version
            logger.debug("Rebuilt cell layer for version %d", editor.version)
        screen.blit(self._background, (0, 0))
        for cell in grid.cells.values():
            snap = cell.snapshot()
            char = cell_glyph(snap, grid.width, grid.height)
            if char == " ":
                continue
            glyph = self._glyph(char, cell_color(snap))
            rect = glyph.get_rect(
                center=(
                    cell.x * self.cell_width + self.cell_width // 2,
                    cell.y * self.cell_height + self.cell_height // 2,
                )
            )
            screen.blit(glyph, rect)
        self._render_toolbar(screen, editor)
        pygame.display.flip()

    def _render_toolbar(self, screen: pygame.Surface, editor: Editor) -> None:
        """Tool keys along the bottom, the selected one underlined."""
        from .input_handler import TOOL_KEYS

        top = self.grid_height
        x = 8
        for key, tool in TOOL_KEYS.items():
            label = f"{pygame.key.name(key)}:{tool.value}"
            surf = self._glyph(label, TOOLBAR_TEXT_COLOR)
            screen.blit(surf, (x, top + 8))
            if editor.tool == tool:
                pygame.draw.line(
                    screen,
                    TOOLBAR_TEXT_COLOR,
                    (x, top + 12 + surf.get_height()),
                    (x + surf.get_width(), top + 12 + surf.get_height()),
                    3,
                )
            x += surf.get_width() + 24
        hint = "enter:start  c:clear  esc:quit"
        surf = self._glyph(hint, TOOLBAR_TEXT_COLOR)
        screen.blit(surf, (self.grid_width - surf.get_width() - 8, top + 8))
