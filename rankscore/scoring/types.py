"""Type definitions for the scoring functions."""

from __future__ import annotations

from dataclasses import dataclass


class ValidationError(ValueError):
    """Raised when a score function receives input outside its domain."""

    pass


# ─────────────────────────────────────────────────────────────────────────────
# Dataclasses for results
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class WilsonInterval:
    """Wilson score confidence interval for an approval proportion."""

    lower: float
    upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower


__all__ = [
    "ValidationError",
    "WilsonInterval",
]
