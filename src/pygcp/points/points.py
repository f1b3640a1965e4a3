import math
from typing import Any, Optional

import numpy as np

from ..types import GcpObject, PointType
from ..util import (
    from_bool,
    from_list,
    from_optional_float,
    from_str,
    is_between,
    to_number,
    vector_from_list,
)

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


class Point(GcpObject):
    """A point placed by the user, either on the map or on a source image"""

    id: str
    """Identifier of the point, unique within an editing session."""
    type: PointType
    coord: np.ndarray

    def __init__(self, id: str, type: PointType, coord: np.ndarray) -> None:
        super(Point, self).__init__()
        self.id = id
        self.type = type
        self.coord = coord

    def to_dict(self) -> dict:
        result = super(Point, self).to_dict()
        result["id"] = from_str(self.id)
        result["type"] = self.type.value
        result["coord"] = [
            None if math.isnan(c) else to_number(c) for c in self.coord
        ]
        return result

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.id)


class MapPoint(Point):
    """A real world point, the coordinates are [latitude, longitude, elevation]"""

    def __init__(self, id: str, coord: np.ndarray) -> None:
        super(MapPoint, self).__init__(id, PointType.MAP, coord)

    @property
    def latitude(self) -> float:
        return float(self.coord[0])

    @property
    def longitude(self) -> float:
        return float(self.coord[1])

    @property
    def elevation(self) -> Optional[float]:
        """The elevation or None if it is unknown"""
        if len(self.coord) < 3 or math.isnan(self.coord[2]):
            return None
        return float(self.coord[2])

    @staticmethod
    def from_dict(obj: Any) -> "MapPoint":
        assert isinstance(obj, dict)
        assert obj.get("type") == PointType.MAP.value
        id = from_str(obj.get("id"))
        coord = vector_from_list(obj.get("coord"), 3, 3, item=from_optional_float)
        lat, lng, z = coord
        if not (
            is_between(lat, *LATITUDE_RANGE)
            and is_between(lng, *LONGITUDE_RANGE)
        ):
            raise ValueError("Latitude or longitude missing or out of range")
        # Only the elevation may be unknown
        if math.isinf(z):
            raise ValueError("Invalid elevation")
        result = MapPoint(id, coord)
        result._extract_unknown_properties(obj)
        return result


class ImagePoint(Point):
    """A point marked on a source image, the coordinates are [x, y] in pixels"""

    img_name: str
    """Name of the image the point was marked on."""
    has_image: bool
    """Whether the image is currently loaded in the editor."""

    def __init__(
        self,
        id: str,
        coord: np.ndarray,
        img_name: str,
        has_image: bool = True,
    ) -> None:
        super(ImagePoint, self).__init__(id, PointType.IMAGE, coord)
        self.img_name = img_name
        self.has_image = has_image

    @property
    def x(self) -> float:
        return float(self.coord[0])

    @property
    def y(self) -> float:
        return float(self.coord[1])

    @staticmethod
    def from_dict(obj: Any) -> "ImagePoint":
        assert isinstance(obj, dict)
        assert obj.get("type") == PointType.IMAGE.value
        id = from_str(obj.get("id"))
        coord = vector_from_list(obj.get("coord"), 2, 2)
        if not np.all(np.isfinite(coord)):
            raise ValueError("Image coordinates must be finite")
        img_name = from_str(obj.get("img_name"))
        has_image = from_bool(obj.get("hasImage", True))
        result = ImagePoint(id, coord, img_name, has_image)
        result._extract_unknown_properties(obj, ignore_keys={"hasImage"})
        return result

    def to_dict(self) -> dict:
        result = super(ImagePoint, self).to_dict()
        result["img_name"] = from_str(self.img_name)
        result["hasImage"] = from_bool(self.has_image)
        return result


point_type_to_class = {
    PointType.MAP: MapPoint,
    PointType.IMAGE: ImagePoint,
}


def point_from_dict(obj: Any) -> Point:
    """Creates a point from its dictionary representation.

    :raise ValueError: If the record has an unknown type or malformed coordinates
    """
    assert isinstance(obj, dict)
    try:
        cls = point_type_to_class[PointType(obj.get("type"))]
    except ValueError:
        raise ValueError(f"Unsupported point type: {obj.get('type')}")
    return cls.from_dict(obj)


def points_from_list(x: Any) -> list[Point]:
    return from_list(point_from_dict, x)
