"""Shortest-arc angle stepping with ease-out for follow cameras.

Orientations are pitch/yaw pairs in degrees. Each axis is wrapped into
``(-180, 180]`` and moved toward its target along the shorter arc. The
step shrinks in proportion to the remaining distance so the camera
decelerates as it lines up with its subject. Roll is never produced.

All functions assume finite inputs: a NaN never compares as converged
and would keep the axis from ever snapping to its target.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Tuple

DEFAULT_SNAP_TOLERANCE = 1e-3


@dataclass(frozen=True)
class Angle2D:
    """Pitch (``x``) and yaw (``y``) in degrees; roll is always zero."""

    x: float
    y: float

    @property
    def z(self) -> float:
        return 0.0

    def normalized(self) -> "Angle2D":
        return Angle2D(normalize_angle(self.x), normalize_angle(self.y))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, 0.0)


def normalize_angle(angle: float) -> float:
    """Map ``angle`` into ``(-180, 180]`` in constant time."""

    wrapped = angle % 360.0
    if wrapped > 180.0:
        wrapped -= 360.0
    return wrapped


def shortest_delta(current: float, target: float) -> float:
    """Signed rotation from ``current`` to ``target`` along the shorter arc.

    Both angles are normalized first so the raw difference lies in
    ``(-360, 360)``. A half-turn keeps the sign of the raw difference.
    """

    delta = normalize_angle(target) - normalize_angle(current)
    if delta > 180.0:
        delta -= 360.0
    elif delta < -180.0:
        delta += 360.0
    return delta


def step_axis(
    current: float,
    target: float,
    base_step: float,
    snap_tolerance: float = DEFAULT_SNAP_TOLERANCE,
) -> float:
    """Advance a single axis one tick toward ``target``."""

    current = normalize_angle(current)
    target = normalize_angle(target)
    delta = shortest_delta(current, target)
    distance = abs(delta)

    # Full speed at a half-turn, tapering linearly to nothing at the target.
    dynamic_step = min(base_step * distance / 180.0, distance)
    if distance <= dynamic_step or distance <= snap_tolerance:
        return target
    if dynamic_step == 0.0:
        return current

    moved = current + math.copysign(dynamic_step, delta)
    if moved == current:
        # The step is below float resolution at this magnitude.
        return target
    return normalize_angle(moved)


def step_angle(
    current: Angle2D,
    target: Angle2D,
    base_step: float,
    snap_tolerance: float = DEFAULT_SNAP_TOLERANCE,
) -> Angle2D:
    """Rotate ``current`` one tick toward ``target`` on both axes.

    ``base_step`` is the step in degrees taken by an axis that is a
    half-turn away from its target; closer axes move proportionally
    less. A step of zero freezes the orientation. Feed the result back
    in as ``current`` on the next tick.
    """

    return Angle2D(
        step_axis(current.x, target.x, base_step, snap_tolerance),
        step_axis(current.y, target.y, base_step, snap_tolerance),
    )
