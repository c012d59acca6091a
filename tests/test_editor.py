from towerdef.editor import MapEditor, MouseButton
from towerdef.gridmap import PIXELS_PER_CELL


def pixel(cell):
    return cell * PIXELS_PER_CELL + 5


def wall_cells(editor):
    return [(cell.x, cell.y) for cell in editor.map if cell.is_wall]


def test_default_size_fits_screen():
    editor = MapEditor()
    assert editor.map.width == 15
    assert editor.map.height == 11


def test_no_spawner_means_invalid_path():
    editor = MapEditor()
    assert editor.status_text() == "Valid Path: FALSE"


def test_left_drag_places_wall():
    editor = MapEditor()
    editor.press(MouseButton.LEFT)
    editor.drag(pixel(2), pixel(3))
    assert editor.map.is_wall(2, 3)


def test_drag_without_press_does_nothing():
    editor = MapEditor()
    editor.drag(pixel(2), pixel(3))
    assert not editor.map.is_wall(2, 3)


def test_release_stops_editing():
    editor = MapEditor()
    editor.press(MouseButton.LEFT)
    editor.release()
    editor.drag(pixel(1), pixel(1))
    assert not editor.map.is_wall(1, 1)
    assert editor.held == MouseButton.NONE


def test_right_drag_removes_wall():
    editor = MapEditor()
    editor.press(MouseButton.LEFT)
    editor.drag(pixel(2), pixel(3))
    editor.release()
    editor.press(MouseButton.RIGHT)
    editor.drag(pixel(2), pixel(3))
    assert not editor.map.is_wall(2, 3)


def test_shift_left_sets_target():
    editor = MapEditor()
    editor.press(MouseButton.LEFT)
    editor.drag(pixel(1), pixel(2), shift=True)
    assert editor.map.is_target(1, 2)
    assert not editor.map.is_target(7, 5)


def test_shift_right_sets_spawner_and_path_is_valid():
    editor = MapEditor()
    editor.press(MouseButton.RIGHT)
    editor.drag(pixel(0), pixel(0), shift=True)
    assert editor.map.is_spawner(0, 0)
    assert editor.status_text() == "Valid Path: TRUE"


def test_wall_line_blocks_path():
    editor = MapEditor()
    editor.press(MouseButton.RIGHT)
    editor.drag(pixel(0), pixel(0), shift=True)
    editor.release()
    editor.press(MouseButton.LEFT)
    for y in range(editor.map.height):
        editor.drag(pixel(3), pixel(y))
    assert editor.status_text() == "Valid Path: FALSE"


def test_press_reports_first_press():
    editor = MapEditor()
    assert editor.press(MouseButton.LEFT) is True
    assert editor.press(MouseButton.RIGHT) is False
    assert editor.held == MouseButton.RIGHT


def test_middle_button_does_not_change_held():
    editor = MapEditor()
    editor.press(MouseButton.MIDDLE)
    assert editor.held == MouseButton.NONE
    editor.drag(pixel(2), pixel(2))
    assert not editor.map.is_wall(2, 2)


def test_drag_outside_map_is_ignored():
    editor = MapEditor()
    editor.press(MouseButton.LEFT)
    editor.drag(pixel(40), pixel(40))
    assert wall_cells(editor) == []
    editor.drag(pixel(2), pixel(2))
    assert wall_cells(editor) == [(2, 2)]