from .factory import (
    find_point,
    generate_id,
    image_point,
    map_point,
    mode_from_id,
    valid_image_coordinate,
    valid_map_coordinate,
)
from .points import (
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    ImagePoint,
    MapPoint,
    Point,
    point_from_dict,
    points_from_list,
)
