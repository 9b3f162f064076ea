"""
Input handling abstraction to decouple Pygame input from editor logic.
"""

from __future__ import annotations
import pygame
from typing import List, Optional, Tuple

from .editor import Tool

# Number keys select painting tools
TOOL_KEYS = {
    pygame.K_1: Tool.START,
    pygame.K_2: Tool.END,
    pygame.K_3: Tool.WALL,
    pygame.K_4: Tool.ERASER,
}

# Mouse actions recorded during a frame, in event order
PRESS = "press"
DRAG = "drag"
RELEASE = "release"


class InputHandler:
    """
    Abstraction for gathering input state. Processes Pygame events and
    provides tool selection, mouse strokes, and action queries.
    """

    def __init__(self) -> None:
        self._quit = False
        self._run = False
        self._reset = False
        self._tool: Optional[Tool] = None
        # (action, pixel position) pairs for this frame
        self._mouse: List[Tuple[str, Tuple[int, int]]] = []

    def process_events(self) -> None:
        """Poll Pygame events and update the per-frame state."""
        self._quit = False
        self._run = False
        self._reset = False
        self._tool = None
        self._mouse = []
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event) -> None:
        """Record the effect of a single Pygame event."""
        if event.type == pygame.QUIT:
            self._quit = True
        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_ESCAPE, pygame.K_x):
                self._quit = True
            elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                self._run = True
            elif event.key == pygame.K_c:
                self._reset = True
            elif event.key in TOOL_KEYS:
                self._tool = TOOL_KEYS[event.key]
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._mouse.append((PRESS, event.pos))
            # Pressing also paints the cell under the cursor
            self._mouse.append((DRAG, event.pos))
        elif event.type == pygame.MOUSEMOTION:
            self._mouse.append((DRAG, event.pos))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._mouse.append((RELEASE, event.pos))
        elif event.type == pygame.WINDOWLEAVE:
            self._mouse.append((RELEASE, (-1, -1)))

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def run_pressed(self) -> bool:
        """Return True if a search was requested this frame."""
        return self._run

    def reset_pressed(self) -> bool:
        """Return True if the grid should be rebuilt this frame."""
        return self._reset

    def selected_tool(self) -> Optional[Tool]:
        """Return the tool chosen this frame, or None."""
        return self._tool

    def mouse_actions(self) -> List[Tuple[str, Tuple[int, int]]]:
        """Return mouse presses, drags and releases in the order they happened."""
        return list(self._mouse)
