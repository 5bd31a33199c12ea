# spatial/textio.py
import logging
import re
from typing import TextIO, Tuple

from spatial.constants import FIELD_SEPARATOR
from spatial.vector import Vector3

logger = logging.getLogger(__name__)

# a decimal float, optionally signed, with exponent; also inf / nan
_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_WHITESPACE = re.compile(r"\s*")


def format_vector(vec: Vector3) -> str:
    """
    Renders ``vec`` as "x, y, z". Floats use their shortest round-trip
    representation, so parse_vector(format_vector(v)) == v.
    """
    return str(vec)


def _scan_number(text: str, pos: int) -> Tuple[float, int]:
    pos = _WHITESPACE.match(text, pos).end()
    m = _NUMBER.match(text, pos)
    if m is None:
        logger.debug("No number at position %d in %r", pos, text)
        raise ValueError(f"Expected a number at position {pos} in {text!r}")
    return float(m.group()), m.end()


def scan_vector(text: str, pos: int = 0) -> Tuple[Vector3, int]:
    """
    Reads one vector starting at ``pos``.

    Each field may be preceded by whitespace. Between fields exactly two
    characters are skipped, whatever they are, which matches the ", "
    separator written by format_vector().

    Returns:
        The vector and the index just past its last field.

    Raises:
        ValueError: If a field is missing or not a number.
    """
    x, pos = _scan_number(text, pos)
    pos += len(FIELD_SEPARATOR)
    y, pos = _scan_number(text, pos)
    pos += len(FIELD_SEPARATOR)
    z, pos = _scan_number(text, pos)
    return Vector3(x, y, z), pos


def parse_vector(text: str) -> Vector3:
    vec, _ = scan_vector(text)
    return vec


def write_vector(stream: TextIO, vec: Vector3):
    stream.write(format_vector(vec))


def read_vector(stream: TextIO) -> Vector3:
    """
    Reads the next line of ``stream`` and parses a vector from it.
    """
    line = stream.readline()
    if not line:
        logger.debug("End of stream reached while reading a vector")
        raise ValueError("Unexpected end of stream while reading a vector")
    return parse_vector(line)
