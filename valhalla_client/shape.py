"""
Encoded polyline ("shape") codec.

Shapes are Google-style encoded polylines: each coordinate is scaled to an
integer, delta-coded against the previous point, zig-zag mapped to an
unsigned value and written as 5-bit groups (least significant first) in the
printable range [63, 126], with 0x20 flagging that another group follows.

Valhalla encodes with 6 decimal digits (polyline6) unless asked otherwise;
Google and most OSRM setups use 5 (polyline5). The codec cannot tell the two
apart, so callers must pass the precision matching the declared shape format.
"""
import math
from typing import Iterable, List, Sequence, Tuple, Union

from .enums import ShapeFormat
from .errors import MalformedPolylineError

PRECISION_5 = 1e-5
PRECISION_6 = 1e-6

_OFFSET = 63
_MAX_CHAR = 126
_CONTINUATION = 0x20
_CHUNK_MASK = 0x1F

LatLon = Tuple[float, float]


def precision_for(shape_format: Union[ShapeFormat, str]) -> float:
    fmt = ShapeFormat(shape_format)
    if fmt is ShapeFormat.POLYLINE6:
        return PRECISION_6
    if fmt is ShapeFormat.POLYLINE5:
        return PRECISION_5
    raise ValueError(f"{fmt.value} is not an encoded polyline format")


def _scale(precision: float) -> float:
    """Inverse of precision, snapped to an integer when it is one (1e5, 1e6)."""
    if isinstance(precision, bool) or not isinstance(precision, (int, float)):
        raise TypeError(f"precision must be a number, got {type(precision).__name__}")
    if not math.isfinite(precision) or precision <= 0:
        raise ValueError(f"precision must be positive and finite, got {precision!r}")
    scale = 1.0 / precision
    nearest = round(scale)
    if nearest and abs(scale - nearest) <= 1e-9 * scale:
        return float(nearest)
    return scale


def _round_half_away(value: float) -> int:
    # Python's round() is banker's rounding; reference encoders round .5 away from zero
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _encode_value(value: int, out: List[str]) -> None:
    value = ~(value << 1) if value < 0 else (value << 1)
    while value >= _CONTINUATION:
        out.append(chr((_CONTINUATION | (value & _CHUNK_MASK)) + _OFFSET))
        value >>= 5
    out.append(chr(value + _OFFSET))


def encode(coordinates: Iterable[Sequence[float]], precision: float = PRECISION_6) -> str:
    """
    Encode [(lat, lon), ...] into a polyline string.

    Values are rounded half away from zero at the given precision, so
    decode(encode(c, p), p) is within 0.5 * p of c on each axis.
    """
    scale = _scale(precision)
    out: List[str] = []
    prev_lat = 0
    prev_lon = 0
    for i, point in enumerate(coordinates):
        lat, lon = point
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ValueError(f"coordinate {i} is not finite: {tuple(point)!r}")
        ilat = _round_half_away(lat * scale)
        ilon = _round_half_away(lon * scale)
        _encode_value(ilat - prev_lat, out)
        _encode_value(ilon - prev_lon, out)
        prev_lat = ilat
        prev_lon = ilon
    return "".join(out)


def _decode_value(encoded: str, idx: int) -> Tuple[int, int]:
    result = 0
    shift = 0
    n = len(encoded)
    while True:
        if idx >= n:
            raise MalformedPolylineError("polyline ends in the middle of a value", position=idx)
        code = ord(encoded[idx])
        if code < _OFFSET or code > _MAX_CHAR:
            raise MalformedPolylineError(f"invalid polyline character {encoded[idx]!r}", position=idx)
        chunk = code - _OFFSET
        idx += 1
        result |= (chunk & _CHUNK_MASK) << shift
        shift += 5
        if not chunk & _CONTINUATION:
            break
    delta = ~(result >> 1) if (result & 1) else (result >> 1)
    return delta, idx


def decode(encoded: str, precision: float = PRECISION_6) -> List[LatLon]:
    """
    Decode a polyline string into [(lat, lon), ...].

    Raises MalformedPolylineError for truncated input or bytes outside
    [63, 126]; nothing is returned for a partially valid string.
    """
    scale = _scale(precision)
    idx = 0
    lat = 0
    lon = 0
    coords: List[LatLon] = []
    n = len(encoded)
    while idx < n:
        dlat, idx = _decode_value(encoded, idx)
        if idx >= n:
            raise MalformedPolylineError("polyline ends after a latitude with no longitude", position=idx)
        dlon, idx = _decode_value(encoded, idx)
        lat += dlat
        lon += dlon
        coords.append((lat / scale, lon / scale))
    return coords
