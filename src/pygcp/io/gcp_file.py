from typing import Iterable, Mapping, Sequence

from ..points import ImagePoint, MapPoint, Point, find_point
from ..util import format_fixed, format_number

GCP_COORDINATE_PRECISION = 6
"""Number of decimals written for latitudes and longitudes."""

Joins = Mapping[str, Sequence[str]]


def _elevation(point: MapPoint) -> str:
    z = point.elevation
    if not z:
        return "0"
    return format_number(z)


def generate_gcp_output(joins: Joins, points: Iterable[Point]) -> list[str]:
    """Generates the rows of a GCP file.

    Every image point referenced by a map point in the join table produces a
    tab separated row: longitude, latitude, elevation, x, y, image name.
    Joins referencing points that do not exist are skipped.

    :param joins: The image point ids referencing each map point id
    :param points: All the points
    :return: The GCP file rows, without a header
    """
    points = list(points)
    rows = []

    for map_id, image_ids in joins.items():
        map_pt = find_point(points, map_id)
        if not isinstance(map_pt, MapPoint):
            continue

        lat = format_fixed(map_pt.latitude, GCP_COORDINATE_PRECISION)
        lng = format_fixed(map_pt.longitude, GCP_COORDINATE_PRECISION)
        z = _elevation(map_pt)

        for image_id in image_ids:
            pt = find_point(points, image_id)
            if not isinstance(pt, ImagePoint):
                continue

            x = format_number(pt.x)
            y = format_number(pt.y)
            rows.append("\t".join([lng, lat, z, x, y, pt.img_name]))

    return rows
