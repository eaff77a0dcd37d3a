"""Implicit distance threshold used when the caller does not pass one.

A fixed threshold does not work well for suggestions:
- Short inputs ("ls") would match almost anything with a threshold of 3.
- Long inputs ("--enable-experimental-cache") deserve more tolerance.

So the threshold grows with the query length:

    threshold = max(len(query), floor) // divisor

With the defaults (floor=3, divisor=3) that is one edit for queries up to five
characters, two for six to eight, and one more for every three characters after
that. `floor` keeps very short queries at one edit instead of zero.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ThresholdPolicy:
    """Derives the maximum accepted distance from the query length."""

    floor: int = 3
    divisor: int = 3

    def __post_init__(self) -> None:
        if self.floor < 1:
            raise ValueError("floor must be >= 1")
        if self.divisor < 1:
            raise ValueError("divisor must be >= 1")

    def threshold_for(self, query: str) -> int:
        """Return the implicit threshold for `query`."""
        return max(len(query), self.floor) // self.divisor

    @classmethod
    def from_env(cls, prefix: str = "NAME_SUGGEST_") -> "ThresholdPolicy":
        """Build a policy from `<prefix>THRESHOLD_FLOOR` / `<prefix>THRESHOLD_DIVISOR`.

        Unset variables keep the defaults.
        """
        return cls(
            floor=get_env_int(f"{prefix}THRESHOLD_FLOOR", cls.floor),
            divisor=get_env_int(f"{prefix}THRESHOLD_DIVISOR", cls.divisor),
        )


def get_env_int(name: str, default: int) -> int:
    """Read an integer environment variable; unset or blank keeps `default`."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ValueError(f"Invalid integer env var {name}={raw!r}") from e


DEFAULT_POLICY = ThresholdPolicy()
