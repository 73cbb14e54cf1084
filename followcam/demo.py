"""Command line harness simulating a follow camera trailing a circling subject."""
from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import Iterator, Optional, Sequence, TextIO

from .angles import Angle2D
from .camera import CameraTransform, FollowCameraController
from .config import CameraSettings, load_camera_settings
from .kinematics import SubjectState
from .vector import Vector3


LOGGER = logging.getLogger(__name__)


class SimulatedCamera:
    """In-memory camera entity integrating its velocity over each time slice."""

    def __init__(self, position: Vector3, angles: Angle2D, time_slice: float) -> None:
        self.position = position
        self.angles = angles
        self.velocity = Vector3.zero()
        self._time_slice = time_slice

    def teleport(self, position: Optional[Vector3], angles: Angle2D, velocity: Vector3) -> None:
        # //1.- Mirror a physics prop: an explicit position wins, otherwise the velocity moves us.
        if position is not None:
            self.position = position
        else:
            self.position = self.position + velocity * self._time_slice
        self.angles = angles
        self.velocity = velocity


def circling_subject(radius: float, degrees_per_tick: float, height: float = 0.0) -> Iterator[SubjectState]:
    """Yield a subject moving counter-clockwise around the origin, facing along its path."""

    tick = 0
    while True:
        heading = degrees_per_tick * tick
        theta = math.radians(heading)
        position = Vector3(radius * math.cos(theta), radius * math.sin(theta), height)
        yield SubjectState(position=position, angles=Angle2D(0.0, heading + 90.0))
        tick += 1


def _record(tick: int, camera: SimulatedCamera, transform: Optional[CameraTransform]) -> dict:
    return {
        "tick": tick,
        "position": list(camera.position.as_tuple()),
        "angles": list(camera.angles.as_tuple()),
        "velocity": list(camera.velocity.as_tuple()),
        "updated": transform is not None,
    }


def run_simulation(
    settings: CameraSettings,
    *,
    ticks: int,
    smooth: bool,
    radius: float,
    degrees_per_tick: float,
    out: TextIO,
) -> SimulatedCamera:
    """Drive a simulated camera for ``ticks`` frames, writing one JSON line per frame."""

    controller = FollowCameraController(settings, smooth=smooth)
    subjects = circling_subject(radius, degrees_per_tick)
    camera = SimulatedCamera(Vector3.zero(), Angle2D(0.0, 0.0), settings.time_slice)
    for tick in range(ticks):
        transform = controller.update(camera, next(subjects))
        out.write(json.dumps(_record(tick, camera, transform)) + "\n")
    LOGGER.info(
        "Simulated %d ticks in %s mode; final yaw %.3f",
        ticks,
        "smooth" if smooth else "snap",
        camera.angles.y,
    )
    return camera


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate a follow camera trailing a circling subject")
    parser.add_argument("--ticks", type=int, default=64, help="Number of simulation frames")
    parser.add_argument("--mode", choices=["smooth", "snap"], default="smooth", help="Camera follow mode")
    parser.add_argument("--radius", type=float, default=500.0, help="Radius of the subject's circle")
    parser.add_argument("--subject-speed", type=float, default=2.0, help="Subject heading change in degrees per tick")
    parser.add_argument("--config", help="JSON file with camera settings (default: FOLLOWCAM_* environment)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for diagnostics on stderr",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="[%(asctime)s] %(levelname)s %(message)s")
    if args.ticks < 0:
        LOGGER.error("--ticks must be non-negative")
        return 2
    settings = load_camera_settings(path=args.config)
    run_simulation(
        settings,
        ticks=args.ticks,
        smooth=args.mode == "smooth",
        radius=args.radius,
        degrees_per_tick=args.subject_speed,
        out=sys.stdout,
    )
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via ``python -m followcam``
    raise SystemExit(main())
