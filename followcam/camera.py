"""Per-tick composition of the follow-camera helpers.

The host owns the camera entity. Each tick it hands the controller the
camera and a snapshot of the followed subject; the controller reads the
camera's transform, computes the next one and writes it back through a
single ``teleport`` call.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .angles import Angle2D, step_angle
from .config import CameraSettings
from .kinematics import SubjectState, position_in_front_of, velocity_toward
from .vector import Vector3


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CameraTransform:
    """Transform to apply to the camera; a ``None`` position keeps the current one."""

    position: Optional[Vector3]
    angles: Angle2D
    velocity: Vector3


class CameraEntity(Protocol):
    """Host-side camera handle the controller reads from and teleports."""

    @property
    def position(self) -> Vector3: ...

    @property
    def angles(self) -> Angle2D: ...

    def teleport(self, position: Optional[Vector3], angles: Angle2D, velocity: Vector3) -> None: ...


def snap_camera(subject: SubjectState, settings: CameraSettings) -> CameraTransform:
    """Place the camera at its offset and copy the subject's view angles outright."""

    position = position_in_front_of(subject, settings.planar_offset, settings.vertical_offset)
    return CameraTransform(
        position=position,
        angles=Angle2D(subject.angles.x, subject.angles.y),
        velocity=Vector3.zero(),
    )


def smooth_camera(
    camera_position: Vector3,
    camera_angles: Angle2D,
    subject: SubjectState,
    settings: CameraSettings,
) -> CameraTransform:
    """Steer the camera toward its offset with a velocity and an eased rotation.

    The position is left for the host's physics to integrate from the
    returned velocity over ``settings.time_slice``.
    """

    desired = position_in_front_of(subject, settings.planar_offset, settings.vertical_offset)
    velocity = velocity_toward(camera_position, desired, settings.time_slice)
    angles = step_angle(camera_angles, subject.angles, settings.base_step_deg, settings.snap_tolerance_deg)
    return CameraTransform(position=None, angles=angles, velocity=velocity)


def _require_finite(label: str, value) -> None:
    if not value.is_finite():
        raise ValueError(f"{label} must be finite, got {value!r}")


class FollowCameraController:
    """Drive a host camera entity after a subject once per tick."""

    def __init__(self, settings: Optional[CameraSettings] = None, *, smooth: bool = True) -> None:
        # //1.- Keep the immutable settings and follow mode for every subsequent tick.
        self._settings = settings or CameraSettings()
        self._smooth = smooth

    @property
    def settings(self) -> CameraSettings:
        return self._settings

    @property
    def smooth(self) -> bool:
        return self._smooth

    def compute(self, camera: CameraEntity, subject: SubjectState) -> Optional[CameraTransform]:
        """Return the next transform for ``camera`` without applying it."""

        # //1.- Leave the camera untouched while the host reports the subject as gone.
        if not subject.valid:
            LOGGER.debug("Skipping camera update for invalid subject")
            return None
        # //2.- Refuse non-finite host state; NaN would never converge on the target.
        _require_finite("subject position", subject.position)
        _require_finite("subject angles", subject.angles)
        if not self._smooth:
            return snap_camera(subject, self._settings)
        camera_position = camera.position
        camera_angles = camera.angles
        _require_finite("camera position", camera_position)
        _require_finite("camera angles", camera_angles)
        return smooth_camera(camera_position, camera_angles, subject, self._settings)

    def update(self, camera: CameraEntity, subject: SubjectState) -> Optional[CameraTransform]:
        """Compute the next transform and teleport ``camera`` to it."""

        transform = self.compute(camera, subject)
        if transform is None:
            return None
        # //3.- Hand the result back to the host through its single write operation.
        camera.teleport(transform.position, transform.angles, transform.velocity)
        LOGGER.debug(
            "Camera update position=%s angles=(%.3f, %.3f) speed=%.3f",
            transform.position.as_tuple() if transform.position is not None else None,
            transform.angles.x,
            transform.angles.y,
            transform.velocity.length(),
        )
        return transform
