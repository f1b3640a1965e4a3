import warnings
from enum import Enum
from types import DynamicClassAttribute
from typing import Any, Mapping, Optional, Sequence

from ..points import ImagePoint, MapPoint, image_point, map_point


class CanonicalColumn(str, Enum):
    @DynamicClassAttribute
    def name(self):
        return self.value

    XCOORD = "xcoord"
    """Longitude of the map point."""
    YCOORD = "ycoord"
    """Latitude of the map point."""
    ZCOORD = "zcoord"
    """Elevation of the map point."""
    XPOINT = "xpoint"
    YPOINT = "ypoint"
    IMG = "img"
    """Name of the image the image point is marked on."""


CONTROLFILE_SCHEMA = {
    CanonicalColumn.XCOORD.value: 0,
    CanonicalColumn.YCOORD.value: 1,
    CanonicalColumn.ZCOORD.value: 2,
    CanonicalColumn.XPOINT.value: 3,
    CanonicalColumn.YPOINT.value: 4,
    CanonicalColumn.IMG.value: 5,
}
"""Position of every canonical column in a canonical row."""

Schema = Mapping[str, int]
Row = list[Any]


def _canonical_keys() -> list[str]:
    return sorted(CONTROLFILE_SCHEMA, key=lambda k: CONTROLFILE_SCHEMA[k])


def _cell(row: Sequence[Any], position: Optional[int]) -> Any:
    if position is None or position < 0 or position >= len(row):
        return None
    return row[position]


def create_rows(schema: Schema, rows: Sequence[Sequence[Any]]) -> list[Row]:
    """Reorders the rows of an external control file into canonical rows.

    :param schema: The position in the external rows of each canonical column.
        Columns missing from the schema are None in the output.
    :param rows: The external rows
    :return: The canonical rows, rows without any value are dropped
    """
    unknown = [k for k in schema if k not in CONTROLFILE_SCHEMA]
    if unknown:
        warnings.warn(f"Ignoring unknown control file columns: {', '.join(unknown)}")

    keys = _canonical_keys()

    result = []
    for row in rows:
        canonical = [_cell(row, schema.get(k)) for k in keys]
        if any(d is not None for d in canonical):
            result.append(canonical)
    return result


def points_from_row(
    row: Sequence[Any], has_image: bool = True
) -> tuple[Optional[MapPoint], Optional[ImagePoint]]:
    """Creates the map and image points described by a canonical row.

    An absent elevation is taken as 0. Either point is None when its columns
    are missing or invalid.
    """
    lng, lat, z, x, y, img = (
        _cell(row, CONTROLFILE_SCHEMA[k]) for k in _canonical_keys()
    )

    if z is None:
        z = 0

    return map_point([lat, lng, z]), image_point([x, y], img, has_image)
