import copy
from enum import Enum
from types import DynamicClassAttribute
from typing import Any, Optional


class PointType(str, Enum):
    @DynamicClassAttribute
    def name(self):
        return self.value

    MAP = "map"
    IMAGE = "image"


class EditMode(str, Enum):
    """What the editor is doing with the point under edit.

    The default mode, when nothing is being edited, is represented by None.
    """

    ADDING = "adding"
    MAP_EDIT = "map_edit"
    IMAGE_EDIT = "img_edit"


def _extract_unknown_properties(gcp_object: Any, obj: dict, ignore_keys=set()) -> Any:
    result = {
        key: copy.deepcopy(val)
        for key, val in obj.items()
        if key not in gcp_object.__dict__ and key not in ignore_keys
    }
    return None if len(result) == 0 else result


class GcpObject:
    """Base class for the serializable objects of the library.
    Properties that are not understood when parsing a dictionary are kept
    and written back by to_dict, so records written by newer editors survive
    a round trip through this library."""

    unknown_properties: Optional[dict]

    def __init__(self, unknown_properties: Optional[dict] = None):
        self.unknown_properties = unknown_properties

    def to_dict(self) -> dict:
        result = (
            {}
            if self.unknown_properties is None
            else copy.deepcopy(self.unknown_properties)
        )
        return result

    def _extract_unknown_properties(self, obj: dict, ignore_keys=set()):
        """This function is meant to be called from `from_dict` static methods to
        identify all unknown properties and store them in self.unknown_properties.

        The implementation compares the keys of the input dict with the attributes
        of the object, which requires that attributes use the same name as the
        dictionary keys. Keys whose name differs from the attribute (e.g. camel
        case keys) must be listed in ignore_keys.
        """
        self.unknown_properties = _extract_unknown_properties(self, obj, ignore_keys)
        return self
