"""Grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """A mutable pair of integer grid coordinates."""

    x: int = 0
    y: int = 0