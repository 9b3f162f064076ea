# Grid settings
# Default grid size in cells, border frame included
GRID_COLS = 61
GRID_ROWS = 21
# Smallest grid that still has a non-frame interior
MIN_GRID_SIZE = 3

# Screen settings
# Size of one cell on screen in pixels (tall, like a terminal character)
CELL_WIDTH = 16
CELL_HEIGHT = 32
# Height of the tool bar drawn under the grid (pixels)
TOOLBAR_HEIGHT = 64
FPS = 60
WINDOW_CAPTION = "Shortest Path Sandbox"
# Font size for cell glyphs and tool bar labels
FONT_SIZE = 24

# Colors
BACKGROUND_COLOR = (0, 0, 0)
FRAME_COLOR = (200, 200, 200)
EMPTY_COLOR = (0, 0, 0)
WALL_COLOR = (255, 255, 255)
START_COLOR = (59, 130, 246)
END_COLOR = (239, 68, 68)
VISITED_COLOR = (234, 179, 8)
PATH_COLOR = (34, 197, 94)
# Tint behind glyphs so visited/path cells stand out on the black background
CELL_TINT = 0.25
TOOLBAR_TEXT_COLOR = (255, 255, 255)

# Glyphs drawn in each cell
START_CHAR = "&"
END_CHAR = "#"
WALL_CHAR = "@"
PATH_CHAR = "$"
VISITED_CHAR = ";"
FRAME_CORNER_CHAR = "+"
FRAME_VERTICAL_CHAR = "|"
FRAME_HORIZONTAL_CHAR = "—"

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
