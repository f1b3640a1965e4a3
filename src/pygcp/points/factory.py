from typing import Any, Iterable, Optional

import numpy as np

from ..shortid import shortid
from ..types import EditMode, PointType
from ..util import format_number, is_between, is_numeric, to_real
from .points import LATITUDE_RANGE, LONGITUDE_RANGE, ImagePoint, MapPoint, Point


def generate_id(coord: Iterable[float], img_name: str = "") -> str:
    """Derives a point id from its coordinates, the image name and a random token,
    e.g. "100_200_a.jpg_3kTMd2xY" for an image point or "45.5_7.25_310__Zq81nB0a"
    for a map point.
    """
    components = "_".join(format_number(c) for c in coord)
    return f"{components}_{img_name}_{shortid()}"


def _is_vector(coord: Any, size: int) -> bool:
    if isinstance(coord, np.ndarray):
        return coord.ndim == 1 and len(coord) == size
    return isinstance(coord, (list, tuple)) and len(coord) == size


def _to_vector(coord: Any) -> np.ndarray:
    # Always a new array, the caller keeps ownership of its sequence
    return np.array([to_real(c) for c in coord], dtype=np.float64)


# [x, y]
def valid_image_coordinate(coord: Any) -> bool:
    if not _is_vector(coord, 2):
        return False
    return is_numeric(coord)


# [lat, lng, z]
def valid_map_coordinate(coord: Any) -> bool:
    if not _is_vector(coord, 3):
        return False
    if not is_numeric(coord):
        return False
    return is_between(to_real(coord[1]), *LONGITUDE_RANGE) and is_between(
        to_real(coord[0]), *LATITUDE_RANGE
    )


def image_point(
    coord: Any, img_name: Any, has_image: bool = True
) -> Optional[ImagePoint]:
    """Creates a point marked on an image.

    :param coord: The [x, y] pixel coordinates
    :param img_name: The name of the image the point belongs to
    :param has_image: Whether the image is currently loaded
    :return: The new point or None if the coordinates or the image name are invalid
    """
    if not valid_image_coordinate(coord) or not isinstance(img_name, str):
        return None

    vector = _to_vector(coord)
    return ImagePoint(generate_id(vector, img_name), vector, img_name, has_image)


def map_point(coord: Any) -> Optional[MapPoint]:
    """Creates a real world point.

    :param coord: The [latitude, longitude, elevation] coordinates
    :return: The new point or None if the coordinates are invalid or out of range
    """
    if not valid_map_coordinate(coord):
        return None

    vector = _to_vector(coord)
    return MapPoint(generate_id(vector), vector)


def find_point(points: Iterable[Point], id: Optional[str]) -> Optional[Point]:
    """
    Returns the first point in the list that matches the given id or None if not found
    """
    return next((p for p in points if p.id == id), None)


def mode_from_id(id: Optional[str], points: Iterable[Point]) -> Optional[EditMode]:
    """Returns the edit mode for the point with the given id, None when there is no such point"""
    point = find_point(points, id)
    if point is None:
        return None

    if point.type == PointType.MAP:
        return EditMode.MAP_EDIT

    return EditMode.IMAGE_EDIT
