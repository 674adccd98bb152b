"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class CheckInType(StrEnum):
    LOCATION = "location"
    MANUAL = "manual"


class VisitStatusFilter(StrEnum):
    ALL = "all"
    VISITED = "visited"
    NOT_VISITED = "not-visited"
