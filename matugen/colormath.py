"""Colour-space conversions and small numeric helpers.

Colours are ARGB tuples ``(alpha, red, green, blue)`` of integers 0-255.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

SRGB_TO_XYZ: tuple[tuple[float, float, float], ...] = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB: tuple[tuple[float, float, float], ...] = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

WHITE_POINT_D65: tuple[float, float, float] = (95.047, 100.0, 108.883)

Argb = tuple[int, int, int, int]
Vec3 = tuple[float, float, float]


def argb_from_rgb(rgb: Sequence[int]) -> Argb:
    """Build an opaque ARGB colour from red, green and blue components."""
    r, g, b = rgb
    return (255, r, g, b)


def format_argb_as_rgb(argb: Sequence[int]) -> str:
    """Format an ARGB colour as ``#rrggbb``."""
    _, r, g, b = argb
    return f"#{r:02x}{g:02x}{b:02x}"


def argb_from_linrgb(linrgb: Sequence[float]) -> Argb:
    """Convert linear RGB components (0-100) to ARGB."""
    return argb_from_rgb(tuple(delinearized(c) for c in linrgb))


def argb_from_xyz(xyz: Sequence[float]) -> Argb:
    """Convert an XYZ colour to ARGB."""
    return argb_from_linrgb(matrix_multiply(xyz, XYZ_TO_SRGB))


def xyz_from_argb(argb: Sequence[int]) -> Vec3:
    """Convert an ARGB colour to XYZ."""
    _, r, g, b = argb
    return matrix_multiply((linearized(r), linearized(g), linearized(b)), SRGB_TO_XYZ)


def argb_from_lab(l: float, a: float, b: float) -> Argb:
    """Convert an L*a*b* colour to ARGB."""
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    x = _lab_invf(fx) * WHITE_POINT_D65[0]
    y = _lab_invf(fy) * WHITE_POINT_D65[1]
    z = _lab_invf(fz) * WHITE_POINT_D65[2]
    return argb_from_xyz((x, y, z))


def lab_from_argb(argb: Sequence[int]) -> Vec3:
    """Convert an ARGB colour to L*a*b*."""
    x, y, z = xyz_from_argb(argb)
    fx = _lab_f(x / WHITE_POINT_D65[0])
    fy = _lab_f(y / WHITE_POINT_D65[1])
    fz = _lab_f(z / WHITE_POINT_D65[2])
    return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def argb_from_lstar(lstar: float) -> Argb:
    """Grey ARGB colour whose lightness matches L*."""
    w = delinearized(y_from_lstar(lstar))
    return argb_from_rgb((w, w, w))


def lstar_from_argb(argb: Sequence[int]) -> float:
    """L* coordinate of an ARGB colour."""
    y = xyz_from_argb(argb)[1]
    return 116.0 * _lab_f(y / 100.0) - 16.0


def y_from_lstar(lstar: float) -> float:
    """Convert L* to the Y of XYZ."""
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def linearized(rgb_comp: int) -> float:
    """Linearize an sRGB channel (0-255) into the range 0-100."""
    normalized = rgb_comp / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(rgb_comp: float) -> int:
    """Convert a linear channel (0-100) back to an sRGB channel (0-255)."""
    normalized = rgb_comp / 100.0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    return int(min(255.0, max(0.0, _round_half_away(value * 255.0))))


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _lab_f(t: float) -> float:
    e = 216.0 / 24389.0
    kappa = 24389.0 / 27.0
    if t > e:
        return t ** (1.0 / 3.0)
    return (kappa * t + 16.0) / 116.0


def _lab_invf(ft: float) -> float:
    e = 216.0 / 24389.0
    kappa = 24389.0 / 27.0
    ft3 = ft * ft * ft
    if ft3 > e:
        return ft3
    return (116.0 * ft - 16.0) / kappa


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation: ``start`` at 0, ``stop`` at 1."""
    return (1.0 - amount) * start + amount * stop


def rotation_direction(start: float, end: float) -> float:
    """1.0 if increasing from ``start`` is the shortest way to ``end``, else -1.0.

    Angles exactly 180 degrees apart give 1.0.
    """
    increasing_difference = sanitize_degrees_double(end - start)
    if increasing_difference <= 180.0:
        return 1.0
    return -1.0


def difference_degrees(a: float, b: float) -> float:
    """Distance between two angles on a circle, in degrees."""
    return 180.0 - abs(abs(a - b) - 180.0)


def sanitize_degrees_int(degrees: int) -> int:
    """Wrap an integer angle into [0, 360)."""
    return degrees % 360


def sanitize_degrees_double(degrees: float) -> float:
    """Wrap a floating-point angle into [0.0, 360.0)."""
    degrees = math.fmod(degrees, 360.0)
    if degrees < 0.0:
        degrees += 360.0
    return degrees


def matrix_multiply(row: Sequence[float], matrix: Sequence[Sequence[float]]) -> Vec3:
    """Multiply a 3x3 matrix by a 3-vector."""
    return tuple(sum(v * m for v, m in zip(row, line)) for line in matrix)  # type: ignore[return-value]