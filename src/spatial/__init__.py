from spatial.constants import DEG_TO_RAD, RAD_TO_DEG, DEFAULT_TOLERANCE, FIELD_SEPARATOR
from spatial.vector import Vector3
from spatial.textio import format_vector, parse_vector, scan_vector, read_vector, write_vector

__all__ = [
    "Vector3",
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "DEFAULT_TOLERANCE",
    "FIELD_SEPARATOR",
    "format_vector",
    "parse_vector",
    "scan_vector",
    "read_vector",
    "write_vector",
]
