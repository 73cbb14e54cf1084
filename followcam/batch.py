"""Vectorised camera helpers for hosts that update many cameras per tick.

Each function mirrors its scalar counterpart in :mod:`followcam.angles` or
:mod:`followcam.kinematics` element for element, operating on numpy arrays
whose trailing axis holds the components.
"""
from __future__ import annotations

import numpy as np

from .angles import DEFAULT_SNAP_TOLERANCE


# //1.- Coerce array-likes to float arrays and enforce the trailing component axis.
def _as_components(values, size: int, name: str) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.ndim == 0 or array.shape[-1] != size:
        raise ValueError(f"{name} must have a trailing axis of length {size}, got shape {array.shape}")
    return array


# //2.- Wrap every element into (-180, 180] using the same modulo rule as the scalar path.
def normalize_angles(angles) -> np.ndarray:
    wrapped = np.mod(np.asarray(angles, dtype=float), 360.0)
    return np.where(wrapped > 180.0, wrapped - 360.0, wrapped)


# //3.- Step pitch/yaw pairs toward their targets along the shorter arc.
def step_angles(current, target, base_step: float, snap_tolerance: float = DEFAULT_SNAP_TOLERANCE) -> np.ndarray:
    """Advance ``(..., 2)`` pitch/yaw arrays one tick toward ``target``."""

    current_arr = normalize_angles(_as_components(current, 2, "current"))
    target_arr = normalize_angles(_as_components(target, 2, "target"))
    current_arr, target_arr = np.broadcast_arrays(current_arr, target_arr)

    delta = target_arr - current_arr
    delta = np.where(delta > 180.0, delta - 360.0, delta)
    delta = np.where(delta < -180.0, delta + 360.0, delta)
    distance = np.abs(delta)

    dynamic_step = np.minimum(base_step * distance / 180.0, distance)
    moved = current_arr + np.copysign(dynamic_step, delta)

    snap = (distance <= dynamic_step) | (distance <= snap_tolerance) | ((dynamic_step > 0.0) & (moved == current_arr))
    frozen = ~snap & (dynamic_step == 0.0)
    return np.where(snap, target_arr, np.where(frozen, current_arr, normalize_angles(moved)))


# //4.- Compute straight-line velocities row by row with the zero-duration and zero-distance fallbacks.
def velocities_toward(start, end, duration: float) -> np.ndarray:
    """Velocities carrying each ``start`` row onto the matching ``end`` row."""

    if duration == 0:
        duration = 1.0
    start_arr = _as_components(start, 3, "start")
    end_arr = _as_components(end, 3, "end")

    direction = end_arr - start_arr
    distance = np.hypot(np.hypot(direction[..., 0], direction[..., 1]), direction[..., 2])[..., None]
    stationary = distance == 0.0
    safe_distance = np.where(stationary, 1.0, distance)
    velocity = (direction / safe_distance) * (distance / duration)
    return np.where(stationary, 0.0, velocity)


# //5.- Offset each subject position along its own yaw heading.
def positions_in_front(positions, yaws_degrees, planar_offset: float, vertical_offset: float = 0.0) -> np.ndarray:
    position_arr = _as_components(positions, 3, "positions")
    yaw = np.radians(np.asarray(yaws_degrees, dtype=float))
    offsets = np.stack(
        [
            planar_offset * np.cos(yaw),
            planar_offset * np.sin(yaw),
            np.full(np.shape(yaw), float(vertical_offset)),
        ],
        axis=-1,
    )
    return position_arr + offsets


__all__ = ["normalize_angles", "step_angles", "velocities_toward", "positions_in_front"]
