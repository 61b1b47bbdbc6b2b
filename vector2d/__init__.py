"""Two dimensional cartesian vector package.

Exposes the immutable :class:`Vec2D` value type together with the
tolerance helpers and their configuration.
"""

from .vector import Vec2D, create
from .settings import DEFAULT_EPSILON, ToleranceSettings, load_tolerance_settings
from .tolerance import almost_equal, is_unit, vectors_almost_equal

__all__ = [
    "Vec2D",
    "create",
    "DEFAULT_EPSILON",
    "ToleranceSettings",
    "load_tolerance_settings",
    "almost_equal",
    "is_unit",
    "vectors_almost_equal",
]
