import pytest

from pygcp.points import image_point, map_point
from pygcp.state import ControlPoints
from pygcp.types import EditMode


@pytest.fixture
def points():
    return [map_point([46.5, 6.5, 372]), image_point([10, 20], "a.jpg")]


def test_mode(points):
    m, i = points

    assert ControlPoints(points=points).mode is None
    assert ControlPoints(points=points, active=True).mode == EditMode.ADDING
    assert ControlPoints(points=points, active=True, point_id=m.id).mode == (
        EditMode.MAP_EDIT
    )
    assert ControlPoints(points=points, active=True, point_id=i.id).mode == (
        EditMode.IMAGE_EDIT
    )
    assert ControlPoints(points=points, active=True, point_id="gone").mode is None


def test_editing(points):
    m, _ = points
    assert ControlPoints(points=points, point_id=m.id).editing is m
    assert ControlPoints(points=points).editing is None


def test_edits_return_new_snapshots(points):
    m, i = points
    state = ControlPoints(points=[m], active=True, point_id=m.id)

    added = state.add_point(i)
    assert state.points == [m]
    assert added.points == [m, i]

    moved = map_point([46.6, 6.6, 372])
    replaced = added.replace_point(m.id, moved)
    assert replaced.points == [moved, i]
    assert replaced.point_id == moved.id
    assert added.points == [m, i]

    removed = replaced.remove_point(moved.id)
    assert removed.points == [i]
    assert removed.point_id is None
    assert removed.active


def test_dict_round_trip(points):
    m, i = points
    state = ControlPoints(points=points, active=True, point_id=i.id)

    d = state.to_dict()
    assert d["active"] is True
    assert d["pointId"] == i.id
    assert [p["type"] for p in d["points"]] == ["map", "image"]

    restored = ControlPoints.from_dict(d)
    assert [p.id for p in restored.points] == [m.id, i.id]
    assert restored.mode == EditMode.IMAGE_EDIT


def test_from_empty_dict():
    state = ControlPoints.from_dict({})
    assert state.points == []
    assert not state.active
    assert state.point_id is None
