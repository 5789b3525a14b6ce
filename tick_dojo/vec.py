"""2D vector and angle helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

Vec = tuple[float, float]


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec, s: float) -> Vec:
    return (v[0] * s, v[1] * s)


def magnitude(v: Vec) -> float:
    return math.hypot(v[0], v[1])


def normalize(v: Vec) -> Vec:
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return scale(v, 1.0 / mag)


def with_magnitude(v: Vec, length: float) -> Vec:
    """Rescale ``v`` to ``length``. A zero vector stays zero."""
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return scale(v, length / mag)


def distance(a: Vec, b: Vec) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def clamp_magnitude(v: Vec, max_mag: float) -> Vec:
    mag = magnitude(v)
    if mag <= max_mag:
        return v
    return scale(v, max_mag / mag)


def rotate(v: Vec, angle: float) -> Vec:
    c = math.cos(angle)
    s = math.sin(angle)
    return (v[0] * c - v[1] * s, v[0] * s + v[1] * c)


def heading(a: Vec, b: Vec) -> float:
    """Bearing in radians from ``a`` toward ``b``. Zero when they coincide."""
    return math.atan2(b[1] - a[1], b[0] - a[0])


def wrap_angle(angle: float) -> float:
    """Normalize an angle to the half-open interval (-pi, pi]."""
    if -math.pi < angle <= math.pi:
        return angle
    wrapped = math.fmod(angle + math.pi, math.tau)
    if wrapped <= 0.0:
        wrapped += math.tau
    return wrapped - math.pi


def clamp_to_rect(p: Vec, lo: Vec, hi: Vec) -> Vec:
    return (
        max(lo[0], min(hi[0], p[0])),
        max(lo[1], min(hi[1], p[1])),
    )
