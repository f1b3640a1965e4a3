from .gcp_file import GCP_COORDINATE_PRECISION, generate_gcp_output
from .rows import (
    CONTROLFILE_SCHEMA,
    CanonicalColumn,
    create_rows,
    points_from_row,
)
