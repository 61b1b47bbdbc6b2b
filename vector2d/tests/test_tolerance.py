"""Tests for epsilon based vector comparisons."""
from __future__ import annotations

import math

import pytest

from vector2d import (
    Vec2D,
    almost_equal,
    create,
    is_unit,
    load_tolerance_settings,
    vectors_almost_equal,
)


def test_almost_equal_uses_default_epsilon() -> None:
    assert almost_equal(1.0, 1.0 + 1e-10)
    assert not almost_equal(1.0, 1.0 + 1e-6)


def test_almost_equal_explicit_epsilon() -> None:
    assert almost_equal(1.0, 1.05, epsilon=0.1)
    assert not almost_equal(1.0, 1.05, epsilon=0.0)


def test_almost_equal_uses_settings_object() -> None:
    loose = load_tolerance_settings({"epsilon": 0.1})
    assert almost_equal(1.0, 1.05, settings=loose)
    assert vectors_almost_equal(create(1.0, 2.0), create(1.05, 1.95), settings=loose)
    assert not almost_equal(1.0, 1.05, 0.01, settings=loose)


# //1.- A stray environment variable cannot break comparisons.
def test_environment_does_not_affect_comparisons(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VECTOR2D_EPSILON", "oops")
    assert almost_equal(1.0, 1.0)
    assert not almost_equal(1.0, 1.05)


def test_almost_equal_rejects_nan() -> None:
    assert not almost_equal(math.nan, math.nan)


def test_vectors_almost_equal_after_rotation() -> None:
    rotated = create(1, 0).with_angle(math.pi / 2)
    assert rotated != Vec2D(0.0, 1.0)
    assert vectors_almost_equal(rotated, Vec2D(0.0, 1.0))
    assert not vectors_almost_equal(rotated, Vec2D(1.0, 0.0))


# //2.- (1, 1) normalizes to a length one ulp below 1.0, the exact check misses it.
def test_is_unit_tolerates_rounding() -> None:
    n = create(1.0, 1.0).normalized()
    assert not n.is_normalized()
    assert is_unit(n)
    assert not is_unit(create(3.0, 4.0))
