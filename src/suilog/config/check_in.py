"""Check-in eligibility configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import env_bool, env_float
from .errors import ConfigurationError

DEFAULT_CHECK_IN_RADIUS_METERS: Final[float] = 1000.0


@dataclass(frozen=True, slots=True)
class CheckInConfig:
    radius_m: float = DEFAULT_CHECK_IN_RADIUS_METERS
    # bypasses the distance check entirely; only meant for local testing
    always_allow: bool = False


def get_check_in_config() -> CheckInConfig:
    radius = env_float("SUILOG_CHECKIN_RADIUS_M", DEFAULT_CHECK_IN_RADIUS_METERS)
    if radius <= 0:
        raise ConfigurationError("SUILOG_CHECKIN_RADIUS_M must be positive")
    return CheckInConfig(
        radius_m=radius,
        always_allow=env_bool("SUILOG_ALWAYS_ALLOW_CHECKIN"),
    )
