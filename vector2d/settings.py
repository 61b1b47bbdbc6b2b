"""Configuration helpers for tolerant vector comparisons."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-9


# //1.- Parse a raw epsilon value rejecting anything that is not a usable tolerance.
def _coerce_epsilon(raw: object) -> float:
    try:
        epsilon = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Epsilon must be numeric, got {raw!r}") from exc
    if not math.isfinite(epsilon) or epsilon < 0:
        raise ValueError(f"Epsilon must be a finite non-negative number, got {raw!r}")
    return epsilon


# //2.- Define dataclass holding the absolute tolerance used by comparison helpers.
@dataclass(frozen=True)
class ToleranceSettings:
    """Absolute tolerance applied by :mod:`vector2d.tolerance`."""

    epsilon: float = DEFAULT_EPSILON

    # //3.- Build settings from a mapping, falling back to defaults for missing keys.
    @classmethod
    def from_mapping(cls, payload: Optional[Dict[str, object]] = None) -> "ToleranceSettings":
        if not payload or "epsilon" not in payload:
            return cls()
        return cls(epsilon=_coerce_epsilon(payload["epsilon"]))


# //4.- Provide canonical configuration accessor used by the comparison helpers.
def load_tolerance_settings(mapping: Optional[Dict[str, object]] = None) -> ToleranceSettings:
    settings = ToleranceSettings.from_mapping(mapping)
    LOGGER.debug("Loaded tolerance settings with epsilon=%r", settings.epsilon)
    return settings


__all__ = ["DEFAULT_EPSILON", "ToleranceSettings", "load_tolerance_settings"]
