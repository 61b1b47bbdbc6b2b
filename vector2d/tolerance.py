"""Epsilon comparisons for vector values.

The predicates on :class:`~vector2d.vector.Vec2D` are exact. These
helpers compare within an absolute tolerance: either the ``epsilon``
passed in, or the one carried by ``settings``, or the default loaded
once when this module is imported.
"""
from __future__ import annotations

from typing import Optional

from .settings import ToleranceSettings, load_tolerance_settings
from .vector import Vec2D

DEFAULT_SETTINGS = load_tolerance_settings()


def _resolve(epsilon: Optional[float], settings: Optional[ToleranceSettings]) -> float:
    if epsilon is not None:
        return epsilon
    return (settings or DEFAULT_SETTINGS).epsilon


def almost_equal(
    a: float,
    b: float,
    epsilon: Optional[float] = None,
    *,
    settings: Optional[ToleranceSettings] = None,
) -> bool:
    """Return ``True`` when ``a`` and ``b`` differ by at most the tolerance."""
    return abs(a - b) <= _resolve(epsilon, settings)


def vectors_almost_equal(
    v: Vec2D,
    w: Vec2D,
    epsilon: Optional[float] = None,
    *,
    settings: Optional[ToleranceSettings] = None,
) -> bool:
    tolerance = _resolve(epsilon, settings)
    return almost_equal(v.x, w.x, tolerance) and almost_equal(v.y, w.y, tolerance)


def is_unit(
    v: Vec2D,
    epsilon: Optional[float] = None,
    *,
    settings: Optional[ToleranceSettings] = None,
) -> bool:
    """Tolerant counterpart of :meth:`Vec2D.is_normalized`."""
    return almost_equal(v.length(), 1.0, _resolve(epsilon, settings))


__all__ = ["DEFAULT_SETTINGS", "almost_equal", "vectors_almost_equal", "is_unit"]
