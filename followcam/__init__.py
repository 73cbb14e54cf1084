"""Follow-camera geometry.

Pure helpers that step a camera's pitch/yaw toward a target along the
shorter arc, derive the velocity that carries it to a point in a fixed
time slice, and place that point in front of or behind a moving subject.
A small controller composes them for hosts that update a camera entity
once per tick.
"""

from .vector import Vector3
from .angles import Angle2D, DEFAULT_SNAP_TOLERANCE, normalize_angle, shortest_delta, step_angle, step_axis
from .kinematics import (
    SubjectState,
    forward_from_yaw,
    is_in_front_of,
    position_in_front,
    position_in_front_of,
    velocity_toward,
)
from .config import CameraSettings, load_camera_settings
from .camera import CameraEntity, CameraTransform, FollowCameraController, smooth_camera, snap_camera

__all__ = [
    "Vector3",
    "Angle2D",
    "DEFAULT_SNAP_TOLERANCE",
    "normalize_angle",
    "shortest_delta",
    "step_angle",
    "step_axis",
    "SubjectState",
    "forward_from_yaw",
    "is_in_front_of",
    "position_in_front",
    "position_in_front_of",
    "velocity_toward",
    "CameraSettings",
    "load_camera_settings",
    "CameraEntity",
    "CameraTransform",
    "FollowCameraController",
    "smooth_camera",
    "snap_camera",
]
