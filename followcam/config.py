"""Configuration for follow-camera tuning values."""
from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass, fields
from typing import Dict, Mapping, Optional

from .angles import DEFAULT_SNAP_TOLERANCE


# Convert one raw setting to float, reporting malformed values as ValueError.
def _coerce_number(name: str, value: object) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


# //1.- Define dataclass bundling every tunable the per-tick update needs.
@dataclass(frozen=True)
class CameraSettings:
    """Tuning values supplied by the host for each camera update."""

    base_step_deg: float = 32.0
    planar_offset: float = -110.0
    vertical_offset: float = 90.0
    time_slice: float = 0.01
    snap_tolerance_deg: float = DEFAULT_SNAP_TOLERANCE

    # //2.- Reject values that would silently stall or corrupt the interpolation.
    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{field.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{field.name} must be finite, got {value!r}")
        if self.base_step_deg < 0:
            raise ValueError("base_step_deg must be non-negative")
        if self.snap_tolerance_deg < 0:
            raise ValueError("snap_tolerance_deg must be non-negative")

    # //3.- Build settings from a plain mapping, falling back to defaults for missing keys.
    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, object]] = None) -> "CameraSettings":
        if not payload:
            return cls()
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ValueError(f"Unknown camera settings: {', '.join(unknown)}")
        return cls(**{name: _coerce_number(name, value) for name, value in payload.items()})

    # //4.- Allow overriding individual values through environment variables.
    @classmethod
    def from_environment(
        cls,
        prefix: str = "FOLLOWCAM",
        env: Optional[Mapping[str, str]] = None,
    ) -> "CameraSettings":
        source = env if env is not None else os.environ
        mapping: Dict[str, float] = {}
        for field in fields(cls):
            raw = source.get(f"{prefix}_{field.name.upper()}")
            if raw is not None:
                mapping[field.name] = float(raw)
        return cls.from_mapping(mapping)

    # //5.- Read a JSON document holding a flat object of settings.
    @classmethod
    def from_json_file(cls, path: str) -> "CameraSettings":
        with open(path, "r", encoding="utf-8") as handle:
            payload = json.load(handle)
        if not isinstance(payload, dict):
            raise ValueError(f"Camera settings file {path} must contain a JSON object")
        return cls.from_mapping(payload)


# //6.- Provide canonical configuration accessor used by hosts and the CLI.
def load_camera_settings(
    mapping: Optional[Mapping[str, object]] = None,
    *,
    path: Optional[str] = None,
    env_prefix: str = "FOLLOWCAM",
) -> CameraSettings:
    if mapping is not None:
        return CameraSettings.from_mapping(mapping)
    if path is not None:
        return CameraSettings.from_json_file(path)
    return CameraSettings.from_environment(prefix=env_prefix)
