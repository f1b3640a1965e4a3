from dataclasses import dataclass, field, replace
from typing import Any, Optional

from typing_extensions import Self

from .points import Point, find_point, mode_from_id, points_from_list
from .types import EditMode
from .util import from_bool, from_none, from_str, from_union


@dataclass(frozen=True, eq=False, kw_only=True)
class ControlPoints:
    """Snapshot of the control points held by the editor"""

    points: list[Point] = field(default_factory=list)
    active: bool = False
    """Whether a point is currently being placed or edited."""
    point_id: Optional[str] = None
    """The id of the point under edit, None while adding a new point."""

    @property
    def editing(self) -> Optional[Point]:
        if self.point_id is None:
            return None
        return find_point(self.points, self.point_id)

    @property
    def mode(self) -> Optional[EditMode]:
        if not self.active:
            return None
        if self.point_id is None:
            return EditMode.ADDING
        return mode_from_id(self.point_id, self.points)

    def add_point(self, point: Point) -> Self:
        return replace(self, points=[*self.points, point])

    def replace_point(self, id: str, point: Point) -> Self:
        """Returns a new snapshot where the point with the given id is replaced"""
        points = [point if p.id == id else p for p in self.points]
        point_id = point.id if self.point_id == id else self.point_id
        return replace(self, points=points, point_id=point_id)

    def remove_point(self, id: str) -> Self:
        points = [p for p in self.points if p.id != id]
        point_id = None if self.point_id == id else self.point_id
        return replace(self, points=points, point_id=point_id)

    @staticmethod
    def from_dict(obj: Any) -> "ControlPoints":
        assert isinstance(obj, dict)
        points = points_from_list(obj.get("points", []))
        active = from_bool(obj.get("active", False))
        point_id = from_union([from_str, from_none], obj.get("pointId"))
        return ControlPoints(points=points, active=active, point_id=point_id)

    def to_dict(self) -> dict:
        return {
            "points": [p.to_dict() for p in self.points],
            "active": self.active,
            "pointId": self.point_id,
        }
