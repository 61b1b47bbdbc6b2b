"""Two dimensional cartesian vector math.

Every operation here is a pure function of its inputs: nothing is
mutated and nothing raises once a vector exists. Degenerate inputs (zero
vectors, division by zero, non-finite components) produce floating-point
results that callers may need to check for themselves. The only special
case is :meth:`Vec2D.normalized`, which maps the zero vector to
``(1, 0)`` instead of ``(nan, nan)``.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Iterable, Iterator, Tuple

import numpy as np

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vec2D:
    """Immutable 2D vector with X and Y components."""

    x: float
    y: float

    def __add__(self, other: "Vec2D") -> "Vec2D":
        return self.add(other)

    def __sub__(self, other: "Vec2D") -> "Vec2D":
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "Vec2D":
        return self.scale(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec2D":
        return self.divide(scalar)

    def __neg__(self) -> "Vec2D":
        return self.reversed()

    def __abs__(self) -> float:
        return self.length()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def is_zero(self) -> bool:
        """Report whether both components are exactly zero."""
        return self.x == 0 and self.y == 0

    def is_normalized(self) -> bool:
        """Report whether the length is exactly 1.0.

        No tolerance is applied, so a vector that went through
        :meth:`normalized` may still report ``False`` by an ulp. Use
        :func:`vector2d.tolerance.is_unit` for an epsilon comparison.
        """
        return self.length() == 1.0

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def angle(self) -> float:
        """Signed angle in radians from the positive X axis, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def with_angle(self, angle: float) -> "Vec2D":
        """Return a vector at ``angle`` radians keeping the current length."""
        return _from_polar(angle, self.length())

    def with_length(self, length: float) -> "Vec2D":
        """Return a vector of ``length`` keeping the current angle.

        The zero vector has angle ``atan2(0, 0) == 0`` so it is stretched
        along the positive X axis.
        """
        return _from_polar(self.angle(), length)

    def normalized(self) -> "Vec2D":
        """Return the unit vector with the same angle.

        A zero-length vector yields ``(1, 0)`` rather than dividing by
        zero.
        """
        length = self.length()
        if length == 0:
            LOGGER.debug("Normalizing zero vector, falling back to unit X")
            return Vec2D.unit_x()
        return Vec2D(self.x / length, self.y / length)

    def truncated(self, max_length: float) -> "Vec2D":
        """Cap the length at ``max_length`` preserving the direction."""
        return self.with_length(min(max_length, self.length()))

    def reversed(self) -> "Vec2D":
        return Vec2D(-self.x, -self.y)

    def perpendicular(self) -> "Vec2D":
        """Return ``(x, -y)``, the one fixed perpendicular direction offered.

        Only the Y component is negated, so ``dot`` with the original is
        ``x * x - y * y`` and vanishes only when ``|x| == |y|``.
        """
        return Vec2D(self.x, -self.y)

    def dot(self, other: "Vec2D") -> float:
        return self.x * other.x + self.y * other.y

    def angle_between(self, other: "Vec2D") -> float:
        """Unsigned angle in radians between two vectors, in [0, pi].

        Rounding after normalization can push the dot product just past
        +/-1, so it is clamped before ``acos``. NaN passes through the
        clamp untouched.
        """

        first = self if self.is_normalized() else self.normalized()
        second = other if other.is_normalized() else other.normalized()
        cosine = first.dot(second)
        if abs(cosine) > 1.0:
            LOGGER.debug("Clamping cosine %r into [-1, 1]", cosine)
        return math.acos(float(np.clip(cosine, -1.0, 1.0)))

    def distance_squared(self, other: "Vec2D") -> float:
        """Squared distance to ``other``, skipping the square root."""
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy

    def distance(self, other: "Vec2D") -> float:
        return math.sqrt(self.distance_squared(other))

    def add(self, other: "Vec2D") -> "Vec2D":
        return Vec2D(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vec2D") -> "Vec2D":
        return Vec2D(self.x - other.x, self.y - other.y)

    def scale(self, scalar: float) -> "Vec2D":
        return Vec2D(self.x * scalar, self.y * scalar)

    def divide(self, scalar: float) -> "Vec2D":
        """Divide both components by ``scalar``.

        Division by zero follows IEEE-754 and yields +/-inf or nan.
        """
        return Vec2D(_ieee_divide(self.x, scalar), _ieee_divide(self.y, scalar))

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @staticmethod
    def zero() -> "Vec2D":
        return Vec2D(0.0, 0.0)

    @staticmethod
    def unit_x() -> "Vec2D":
        return Vec2D(1.0, 0.0)

    @staticmethod
    def from_iter(values: Iterable[float]) -> "Vec2D":
        x, y = values
        return Vec2D(float(x), float(y))


def create(x: float, y: float) -> Vec2D:
    """Create a vector from explicit X and Y values without validation.

    Values are coerced with ``float``, so integers too large for a double
    raise ``OverflowError`` here. Every other input, NaN and infinities
    included, is accepted.
    """
    return Vec2D(float(x), float(y))


def _ieee_divide(numerator: float, denominator: float) -> float:
    # Python floats raise ZeroDivisionError, numpy float64 does not.
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _from_polar(angle: float, length: float) -> Vec2D:
    if math.isinf(angle):
        # math.cos rejects infinities, the IEEE result is nan.
        return Vec2D(math.nan, math.nan)
    return Vec2D(math.cos(angle) * length, math.sin(angle) * length)


__all__ = ["Vec2D", "create"]
