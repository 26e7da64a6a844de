"""
Projection of horizontal coordinates onto a character grid.

Tangent-plane projection centred on a look direction (alt, az):

- Screen centre = (center_alt, center_az)
- Screen +X     = right, Screen +Y = up (rows grow downward on output)
- FOV is the full angular width of the view in degrees

Objects further than fov/2 from the centre are rejected before any pixel is
computed. Everything degenerates as fov approaches 180° and at the antipode
of the centre; callers get ``visible=False`` there, never an exception.
"""

from __future__ import annotations
import math
from typing import Tuple

from .types import ScreenPoint, ViewState

Vec3 = Tuple[float, float, float]


def to_vec(alt_deg: float, az_deg: float) -> Vec3:
    """Unit vector (East, North, Up); azimuth clockwise from North."""
    a = math.radians(alt_deg)
    z = math.radians(az_deg)
    return (math.cos(a) * math.sin(z), math.cos(a) * math.cos(z), math.sin(a))


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0])


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def tangent_frame(center: Vec3) -> Tuple[Vec3, Vec3]:
    """
    Orthonormal (right, up) pair at ``center``.
    Reference up is the zenith; looking straight up/down falls back to North.
    """
    right = _cross(center, (0.0, 0.0, 1.0))
    r_len = math.sqrt(_dot(right, right))
    if r_len < 1e-9:
        right = _cross(center, (0.0, 1.0, 0.0))
        r_len = math.sqrt(_dot(right, right))
    right = (right[0] / r_len, right[1] / r_len, right[2] / r_len)
    up = _cross(right, center)
    return right, up


def project_normalized(obj_alt: float, obj_az: float,
                       center_alt: float, center_az: float,
                       fov: float) -> Tuple[float, float, bool]:
    """
    Project to tangent-plane coordinates scaled so the screen spans [-1, 1]
    on both axes. Returns (sx, sy, inside_fov).
    """
    half_fov = math.radians(fov) / 2.0
    if half_fov <= 0.0:
        return 0.0, 0.0, False

    obj = to_vec(obj_alt, obj_az)
    center = to_vec(center_alt, center_az)

    separation = math.acos(max(-1.0, min(1.0, _dot(obj, center))))
    if separation > half_fov:
        return 0.0, 0.0, False

    right, up = tangent_frame(center)
    scale = 2.0 / math.tan(half_fov)
    return _dot(obj, right) * scale, _dot(obj, up) * scale, True


def project(obj_alt: float, obj_az: float,
            center_alt: float, center_az: float,
            fov: float, width: int, height: int) -> ScreenPoint:
    """Project (alt, az) to an integer cell of a width x height grid."""
    sx, sy, inside = project_normalized(obj_alt, obj_az, center_alt, center_az, fov)
    if not inside:
        return ScreenPoint.hidden()

    # Truncation toward zero, so a point just left of or above the edge
    # lands in column/row 0.
    x = int(width / 2.0 + sx * width / 2.0)
    y = int(height / 2.0 - sy * height / 2.0)

    if x < 0 or x >= width or y < 0 or y >= height:
        return ScreenPoint.hidden()
    return ScreenPoint(x, y, True)


class ViewProjection:
    """A ViewState bound to a screen size."""

    def __init__(self, view: ViewState, width: int, height: int):
        self.center_alt = view.center_alt
        self.center_az = view.center_az
        self.fov = view.fov
        self.width = width
        self.height = height

    def project(self, alt_deg: float, az_deg: float) -> ScreenPoint:
        return project(alt_deg, az_deg, self.center_alt, self.center_az,
                       self.fov, self.width, self.height)

    def project_normalized(self, alt_deg: float, az_deg: float) -> Tuple[float, float, bool]:
        return project_normalized(alt_deg, az_deg, self.center_alt, self.center_az, self.fov)

    def distance_from_center(self, alt_deg: float, az_deg: float) -> float:
        """Cell distance from the screen centre, ``inf`` when not visible."""
        p = self.project(alt_deg, az_deg)
        if not p.visible:
            return math.inf
        return math.hypot(p.x - self.width // 2, p.y - self.height // 2)
