from dataclasses import dataclass, field
from typing import Mapping, Sequence

from .points import Point
from .types import PointType

MIN_POINTS = 15
"""5 control objects with 3 image points each."""
MIN_IMAGE_POINTS = 9
MIN_CONTROL_OBJECTS = 5
MIN_IMAGE_POINTS_PER_OBJECT = 3

GCP_DOCUMENTATION_URL = "https://github.com/OpenDroneMap/OpenDroneMap/wiki/Running-OpenDroneMap#running-odm-with-ground-control"

NOT_ENOUGH_POINTS = (
    "A ground control point file must have a minimum of 15 points. There needs to 5 "
    "control objects and each control object must have 3 image points referenced. "
    f'Please see this <a href="{GCP_DOCUMENTATION_URL}" target="_blank">article</a> '
    "for more information."
)
# The check is against MIN_IMAGE_POINTS (9) even though the message asks for 10
NOT_ENOUGH_IMAGE_POINTS = "Need at least 10 image points."
NOT_ENOUGH_CONTROL_OBJECTS = (
    "Seems you have enough image points but not enough control objects. "
    "There must be at least 5."
)
NOT_ENOUGH_REFERENCED_OBJECTS = (
    "There must be at least 5 control points that have image points referenced."
)
NOT_ENOUGH_OBJECT_IMAGE_POINTS = (
    "Control objects must have at least 3 image points referenced."
)


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)

    def __bool__(self):
        return self.valid


def validate(
    points: Sequence[Point], joins: Mapping[str, Sequence[str]]
) -> ValidationResult:
    """Checks that a set of points is usable as a GCP file.

    Known limitation: the image points of a control object are not required to
    come from 3 different images.

    :param points: All the points
    :param joins: The image point ids referencing each map point id
    :return: The validation result with human readable error messages
    """
    if len(points) < MIN_POINTS:
        return ValidationResult(False, [NOT_ENOUGH_POINTS])

    errors = []

    map_points = [pt for pt in points if pt.type == PointType.MAP]
    image_points_count = len(points) - len(map_points)
    valid_objects = [
        k for k, ids in joins.items() if len(ids) >= MIN_IMAGE_POINTS_PER_OBJECT
    ]

    if image_points_count < MIN_IMAGE_POINTS:
        errors.append(NOT_ENOUGH_IMAGE_POINTS)

    if len(map_points) < MIN_CONTROL_OBJECTS:
        errors.append(NOT_ENOUGH_CONTROL_OBJECTS)
    elif len(joins) < MIN_CONTROL_OBJECTS:
        errors.append(NOT_ENOUGH_REFERENCED_OBJECTS)
    elif len(valid_objects) < MIN_CONTROL_OBJECTS:
        errors.append(NOT_ENOUGH_OBJECT_IMAGE_POINTS)

    return ValidationResult(len(errors) == 0, errors)
