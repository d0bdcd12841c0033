"""Controller-side checks for throw inputs.

The simulation core never validates ranges; callers run these first and show
the error text instead of firing.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import ANGLE_MAX_DEG, ANGLE_MIN_DEG, VELOCITY_MAX, VELOCITY_MIN


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: str | None = None


OK = ValidationResult(valid=True)


def validate_angle(angle: float) -> ValidationResult:
    if not math.isfinite(angle) or angle < ANGLE_MIN_DEG or angle > ANGLE_MAX_DEG:
        return ValidationResult(False, f"Angle must be between {ANGLE_MIN_DEG} and {ANGLE_MAX_DEG} degrees")
    return OK


def validate_velocity(velocity: float) -> ValidationResult:
    if not math.isfinite(velocity) or velocity < VELOCITY_MIN or velocity > VELOCITY_MAX:
        return ValidationResult(False, f"Velocity must be between {VELOCITY_MIN} and {VELOCITY_MAX}")
    return OK


def validate_throw_inputs(angle: float, velocity: float) -> ValidationResult:
    result = validate_angle(angle)
    if not result.valid:
        return result
    return validate_velocity(velocity)
