import warnings

import numpy as np
import pytest

from pygcp.io import CONTROLFILE_SCHEMA, CanonicalColumn, create_rows, points_from_row


def test_create_rows_remaps_columns():
    assert create_rows({"xcoord": 1, "ycoord": 0}, [[10, 20]]) == [
        [20, 10, None, None, None, None]
    ]


def test_create_rows_canonical_schema():
    row = [6.5668, 46.5191, 372, 1024, 768, "IMG_0001.JPG"]
    assert create_rows(CONTROLFILE_SCHEMA, [row]) == [row]


def test_create_rows_legacy_layout():
    # image name first, then pixel and geographic coordinates
    schema = {"img": 0, "xpoint": 1, "ypoint": 2, "xcoord": 3, "ycoord": 4, "zcoord": 5}
    rows = [["IMG_0001.JPG", 1024, 768, 6.5668, 46.5191, 372]]
    assert create_rows(schema, rows) == [
        [6.5668, 46.5191, 372, 1024, 768, "IMG_0001.JPG"]
    ]


def test_create_rows_does_not_depend_on_schema_order():
    rows = [[1, 2, 3, 4, 5, 6]]
    forward = {"xcoord": 0, "ycoord": 1, "img": 5}
    backward = {"img": 5, "ycoord": 1, "xcoord": 0}
    assert create_rows(forward, rows) == create_rows(backward, rows)
    assert create_rows(forward, rows) == [[1, 2, None, None, None, 6]]


def test_create_rows_drops_blank_rows():
    rows = [[10, 20], [], [None, None], [30]]
    assert create_rows({"xcoord": 0, "ycoord": 1}, rows) == [
        [10, 20, None, None, None, None],
        [30, None, None, None, None, None],
    ]


def test_create_rows_index_out_of_row():
    assert create_rows({"xcoord": 5}, [[1, 2]]) == []


def test_create_rows_keeps_values_unchecked():
    assert create_rows({"xcoord": 0}, [["not a number"]]) == [
        ["not a number", None, None, None, None, None]
    ]


def test_create_rows_warns_about_unknown_columns():
    with pytest.warns(UserWarning, match="elevation"):
        rows = create_rows({"xcoord": 0, "elevation": 1}, [[1, 2]])
    assert rows == [[1, None, None, None, None, None]]


def test_create_rows_known_columns_do_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        create_rows(CONTROLFILE_SCHEMA, [[1, 2, 3, 4, 5, 6]])


def test_canonical_columns_follow_schema():
    assert [c.value for c in CanonicalColumn] == sorted(
        CONTROLFILE_SCHEMA, key=CONTROLFILE_SCHEMA.get
    )


def test_points_from_row():
    map_pt, image_pt = points_from_row([6.5668, 46.5191, 372, 1024, 768, "a.jpg"])

    np.testing.assert_array_equal(map_pt.coord, [46.5191, 6.5668, 372])
    np.testing.assert_array_equal(image_pt.coord, [1024, 768])
    assert image_pt.img_name == "a.jpg"
    assert image_pt.has_image


def test_points_from_row_without_elevation():
    map_pt, _ = points_from_row([6.5, 46.5, None, 10, 20, "a.jpg"])
    assert map_pt.elevation == 0


def test_points_from_text_row():
    map_pt, image_pt = points_from_row(["6.5", "46.5", "372", "10", "20", "a.jpg"])
    np.testing.assert_array_equal(map_pt.coord, [46.5, 6.5, 372])
    np.testing.assert_array_equal(image_pt.coord, [10, 20])


def test_points_from_partial_rows():
    map_pt, image_pt = points_from_row([None, None, None, 10, 20, "a.jpg"])
    assert map_pt is None
    assert image_pt is not None

    map_pt, image_pt = points_from_row(
        [6.5, 46.5, 10, None, None, None], has_image=False
    )
    assert map_pt is not None
    assert image_pt is None
