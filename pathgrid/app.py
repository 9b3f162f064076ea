from __future__ import annotations
import logging
import pygame
from typing import Optional

from .config import FPS, GRID_COLS, GRID_ROWS, WINDOW_CAPTION
from .cell import CellId
from .editor import Editor, Tool
from .input_handler import DRAG, PRESS, RELEASE, InputHandler
from .renderer import Renderer

logger = logging.getLogger(__name__)


class App:
    """Main App class: handles initialization, loop, and high-level coordination."""

    def __init__(
        self,
        cols: int = GRID_COLS,
        rows: int = GRID_ROWS,
        heap: bool = False,
        start: Optional[CellId] = None,
        end: Optional[CellId] = None,
        clock: Optional[pygame.time.Clock] = None,
    ) -> None:
        # Initialize Pygame and its subsystems
        pygame.init()
        # Painting state and the grid it edits
        self.editor = Editor(cols, rows, heap=heap)
        # Endpoints given up front, e.g. on the command line
        for tool, cell_id in ((Tool.START, start), (Tool.END, end)):
            if cell_id is not None:
                self.editor.place(tool, cell_id)
        self.renderer = Renderer(cols, rows)
        # Window sized to fit the grid and tool bar
        self.screen = pygame.display.set_mode(self.renderer.size)
        pygame.display.set_caption(WINDOW_CAPTION)
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        # Input abstraction
        self.input = InputHandler()
        # Control flag
        self.running = True

    def handle_events(self) -> None:
        """Process input via InputHandler and forward it to the editor."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
            return
        tool = self.input.selected_tool()
        if tool is not None:
            self.editor.select_tool(tool)
        for action, pos in self.input.mouse_actions():
            if action == RELEASE:
                self.editor.release()
                continue
            cell_id = self.renderer.cell_at(pos)
            if cell_id is None:
                continue
            if action == PRESS:
                self.editor.press(cell_id)
            elif action == DRAG:
                self.editor.drag(cell_id)
        if self.input.reset_pressed():
            self.editor.reset()
        if self.input.run_pressed():
            self.editor.run()

    def render(self) -> None:
        """Render the entire scene."""
        self.renderer.render(self.screen, self.editor)

    def run(self) -> None:
        """Main loop: handle events and render."""
        logger.info(
            "Sandbox started with a %dx%d grid",
            self.editor.cols,
            self.editor.rows,
        )
        while self.running:
            self.clock.tick(self.fps)
            self.handle_events()
            self.render()
        pygame.quit()
        # Return to caller instead of exiting process
        return
