import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from planners import Direction, Point, annotate_path, direction_between, format_path


@pytest.mark.parametrize("parent,child,expected", [
    ((3, 3), (4, 3), Direction.DOWN),
    ((3, 3), (2, 3), Direction.UP),
    ((3, 3), (3, 4), Direction.RIGHT),
    ((3, 3), (3, 2), Direction.LEFT),
])
def test_direction_between(parent, child, expected):
    assert direction_between(parent, child) is expected


@pytest.mark.parametrize("child", [(3, 3), (4, 4), (5, 3), (3, 1)])
def test_direction_between_rejects_non_neighbours(child):
    with pytest.raises(ValueError):
        direction_between((3, 3), child)


def test_expansion_order_is_up_down_left_right():
    assert [d.delta for d in Direction] == [(-1, 0), (1, 0), (0, -1), (0, 1)]


def test_annotate_path_first_entry_has_no_direction():
    path = [Point(0, 0), Point(0, 1), Point(1, 1)]
    assert annotate_path(path) == [
        ((0, 0), None),
        ((0, 1), Direction.RIGHT),
        ((1, 1), Direction.DOWN),
    ]
    assert annotate_path([]) == []


def test_format_path():
    path = [(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]
    assert format_path(path) == "{0, 0} -> {1, 0}⬇️ -> {1, 1}➡️ -> {0, 1}⬆️ -> {0, 0}⬅️"
    assert format_path(path, glyphs=False) == "{0, 0} -> {1, 0} -> {1, 1} -> {0, 1} -> {0, 0}"
    assert format_path([(2, 5)]) == "{2, 5}"
