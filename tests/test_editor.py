import logging

import pytest

from pathgrid.cell import Mark, Role
from pathgrid.editor import Editor, Tool


@pytest.fixture
def editor():
    return Editor(7, 7)


def place(editor, tool, cell_id):
    editor.select_tool(tool)
    editor.press(cell_id)
    editor.release()


def test_editor_starts_empty(editor):
    assert editor.tool is None
    assert editor.start_id is None and editor.end_id is None
    assert not editor.mouse_down
    assert editor.version == 0
    assert editor.grid.width == 7 and editor.grid.height == 7


def test_place_start_and_end(editor):
    place(editor, Tool.START, (1, 1))
    place(editor, Tool.END, (5, 5))
    assert editor.start_id == (1, 1)
    assert editor.end_id == (5, 5)
    assert editor.grid.cells[(1, 1)].role == Role.START
    assert editor.grid.cells[(5, 5)].role == Role.END
    assert editor.grid.start_id == (1, 1)
    assert editor.grid.end_id == (5, 5)


def test_only_one_start(editor):
    place(editor, Tool.START, (1, 1))
    place(editor, Tool.START, (2, 2))
    assert editor.start_id == (1, 1)
    assert editor.grid.cells[(2, 2)].role == Role.EMPTY


def test_start_over_end_forgets_end(editor):
    place(editor, Tool.END, (3, 3))
    place(editor, Tool.START, (3, 3))
    assert editor.start_id == (3, 3)
    assert editor.end_id is None


def test_press_on_frame_is_ignored(editor):
    place(editor, Tool.START, (0, 3))
    assert editor.start_id is None
    assert editor.grid.cells[(0, 3)].role == Role.EMPTY


def test_drag_requires_mouse_down(editor):
    editor.select_tool(Tool.WALL)
    editor.drag((2, 2))
    assert editor.grid.cells[(2, 2)].role == Role.EMPTY


def test_drag_paints_walls(editor):
    editor.select_tool(Tool.WALL)
    editor.press((2, 2))
    for cell_id in ((2, 2), (2, 3), (2, 4)):
        editor.drag(cell_id)
    editor.release()
    for cell_id in ((2, 2), (2, 3), (2, 4)):
        cell = editor.grid.cells[cell_id]
        assert cell.role == Role.WALL
        assert not cell.is_passable()
    assert not editor.mouse_down


def test_wall_over_start_forgets_start(editor):
    place(editor, Tool.START, (1, 1))
    editor.select_tool(Tool.WALL)
    editor.press((1, 1))
    editor.drag((1, 1))
    assert editor.start_id is None
    assert editor.grid.cells[(1, 1)].role == Role.WALL


def test_drag_on_frame_is_ignored(editor):
    editor.select_tool(Tool.ERASER)
    editor.press((1, 1))
    editor.drag((0, 0))
    cell = editor.grid.cells[(0, 0)]
    assert cell.get_is_frame()
    assert not cell.is_passable()


def test_eraser_clears_walls_and_endpoints(editor):
    place(editor, Tool.END, (4, 4))
    editor.select_tool(Tool.WALL)
    editor.press((3, 3))
    editor.drag((3, 3))
    editor.release()
    editor.select_tool(Tool.ERASER)
    editor.press((3, 3))
    editor.drag((3, 3))
    editor.drag((4, 4))
    editor.release()
    assert editor.grid.cells[(3, 3)].role == Role.EMPTY
    assert editor.grid.cells[(3, 3)].is_passable()
    assert editor.grid.cells[(4, 4)].role == Role.EMPTY
    assert editor.end_id is None


def test_painting_clears_search_marks(editor):
    place(editor, Tool.START, (1, 1))
    place(editor, Tool.END, (5, 5))
    assert editor.run() is not None
    editor.select_tool(Tool.WALL)
    editor.press((1, 5))
    editor.drag((1, 5))
    assert all(
        c.get_mark() == Mark.NONE for c in editor.grid.cells.values()
    )


def test_run_without_endpoints_warns(editor, caplog):
    place(editor, Tool.START, (1, 1))
    with caplog.at_level(logging.WARNING, logger="pathgrid.editor"):
        assert editor.run() is None
    assert "start and an end" in caplog.text


def test_run_marks_path(editor):
    place(editor, Tool.START, (1, 1))
    place(editor, Tool.END, (3, 3))
    version = editor.version
    path = editor.run()
    assert path == [(1, 1), (2, 2), (3, 3)]
    assert editor.last_path == path
    assert editor.grid.cells[(2, 2)].get_mark() == Mark.PATH
    assert editor.version > version


def test_run_with_heap_frontier():
    editor = Editor(7, 7, heap=True)
    place(editor, Tool.START, (1, 3))
    place(editor, Tool.END, (5, 3))
    assert editor.run() == [(1, 3), (2, 3), (3, 3), (4, 3), (5, 3)]


def test_run_no_path(editor):
    place(editor, Tool.START, (1, 1))
    place(editor, Tool.END, (5, 5))
    editor.select_tool(Tool.WALL)
    editor.press((1, 2))
    for cell_id in ((1, 2), (2, 2), (2, 1)):
        editor.drag(cell_id)
    editor.release()
    assert editor.run() is None
    assert editor.last_path is None


def test_reset_builds_a_fresh_grid(editor):
    place(editor, Tool.START, (1, 1))
    place(editor, Tool.END, (2, 2))
    old_grid = editor.grid
    editor.reset()
    assert editor.grid is not old_grid
    assert editor.start_id is None and editor.end_id is None
    assert editor.version == 0
    assert all(c.role == Role.EMPTY for c in editor.grid.cells.values())


def test_version_counts_changes(editor):
    place(editor, Tool.START, (1, 1))
    assert editor.version == 1
    editor.select_tool(Tool.WALL)
    editor.press((2, 2))
    # Pressing with the wall tool changes nothing by itself
    assert editor.version == 1
    editor.drag((2, 2))
    assert editor.version == 2


def test_press_without_effect_keeps_version(editor):
    place(editor, Tool.START, (1, 1))
    # A second start, no tool, or the eraser: nothing is placed
    place(editor, Tool.START, (2, 2))
    editor.tool = None
    editor.press((3, 3))
    editor.release()
    place(editor, Tool.ERASER, (4, 4))
    assert editor.version == 1


def test_place_keeps_selected_tool(editor):
    editor.select_tool(Tool.WALL)
    editor.place(Tool.END, (4, 2))
    assert editor.end_id == (4, 2)
    assert editor.tool == Tool.WALL
    assert not editor.mouse_down
