"""Linear kinematics helpers for positioning a camera around a subject."""
from __future__ import annotations

from dataclasses import dataclass
import math

from .angles import Angle2D
from .vector import Vector3


@dataclass(frozen=True)
class SubjectState:
    """Snapshot of a followed entity as read from the host each tick.

    ``valid`` mirrors the host's own entity validity checks; the helpers
    here never inspect the entity beyond this snapshot.
    """

    position: Vector3
    angles: Angle2D
    valid: bool = True

    @property
    def yaw(self) -> float:
        return self.angles.y


def velocity_toward(start: Vector3, end: Vector3, duration: float) -> Vector3:
    """Velocity that carries ``start`` onto ``end`` in ``duration`` time units.

    A zero duration is treated as one unit. Coincident points yield the
    zero vector.
    """

    if duration == 0:
        duration = 1.0

    direction = end - start
    distance = direction.length()
    if distance == 0:
        return Vector3.zero()

    speed = distance / duration
    return (direction / distance) * speed


def forward_from_yaw(yaw_degrees: float) -> Vector3:
    """Horizontal unit vector for a yaw measured from +X toward +Y."""

    yaw = math.radians(yaw_degrees)
    return Vector3(math.cos(yaw), math.sin(yaw), 0.0)


def position_in_front(
    position: Vector3,
    yaw_degrees: float,
    planar_offset: float,
    vertical_offset: float = 0.0,
) -> Vector3:
    """World point ``planar_offset`` units along the yaw heading, raised by ``vertical_offset``.

    Negative planar offsets land behind the subject.
    """

    yaw = math.radians(yaw_degrees)
    return Vector3(
        position.x + planar_offset * math.cos(yaw),
        position.y + planar_offset * math.sin(yaw),
        position.z + vertical_offset,
    )


def position_in_front_of(subject: SubjectState, planar_offset: float, vertical_offset: float = 0.0) -> Vector3:
    return position_in_front(subject.position, subject.yaw, planar_offset, vertical_offset)


def is_in_front_of(observer: SubjectState, other: SubjectState) -> bool:
    """Return ``True`` when ``other`` sits on the negative side of ``observer``'s heading.

    Despite the name this is true for subjects *behind* the observer's
    forward vector: an observer facing +X reports ``True`` for a subject at
    -X and ``False`` for one at +X. Hosts depend on that result, so the
    comparison is kept as is. Invalid snapshots always give ``False``.
    """

    if not observer.valid or not other.valid:
        return False

    forward = forward_from_yaw(observer.yaw)
    to_other = other.position - observer.position
    return to_other.dot(forward) < 0
