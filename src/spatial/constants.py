# spatial/constants.py
import math

# angle conversion
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# default bound for match() and the alignment checks
DEFAULT_TOLERANCE = 1e-4

# text format: "x, y, z"
FIELD_SEPARATOR = ", "
