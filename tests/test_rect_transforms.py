"""Tests for Rect translation, scaling, insetting, bounding, flipping and operators."""

import math

import numpy as np
import pytest

from tinykit.geometry import Point, Rect, Size


def assert_rect_close(actual, expected, atol=1e-9):
    np.testing.assert_allclose(actual.to_array(), expected.to_array(), atol=atol)


class TestTranslation:
    def test_single_axis(self, offset_rect):
        assert offset_rect.translated(x=5) == Rect(25, 30, 40, 20)
        assert offset_rect.translated(y=-5) == Rect(20, 25, 40, 20)

    def test_both_axes(self, offset_rect):
        assert offset_rect.translated(5, -5) == Rect(25, 25, 40, 20)

    def test_scalar_applies_to_both_axes(self, offset_rect):
        assert offset_rect.translated_by(3) == Rect(23, 33, 40, 20)

    def test_vector(self, offset_rect):
        assert offset_rect.translated_by(Point(-20, -30)) == Rect(0, 0, 40, 20)

    def test_polar(self, unit_rect):
        moved = unit_rect.translated_polar(10, math.pi)
        assert_rect_close(moved, Rect(-10, 0, 10, 10))
        moved = unit_rect.translated_polar(math.sqrt(2), math.pi / 4)
        assert_rect_close(moved, Rect(1, 1, 10, 10))

    @pytest.mark.parametrize("dx,dy", [(0, 0), (3, -7), (-12.5, 4.25)])
    def test_translation_is_reversible(self, offset_rect, dx, dy):
        assert offset_rect.translated(dx, dy).translated(-dx, -dy) == offset_rect


class TestScaling:
    def test_pivot_at_origin(self, unit_rect):
        assert unit_rect.scaled(width=2, pivot=Point(0, 0)) == Rect(0, 0, 20, 10)

    def test_pivot_keeps_pivot_fixed(self, unit_rect, pivot):
        assert unit_rect.scaled(width=2, pivot=pivot) == Rect(-10, 0, 20, 10)

    def test_without_pivot_only_size_changes(self, offset_rect):
        assert offset_rect.scaled(2, 3) == Rect(20, 30, 80, 60)

    def test_height_only(self, offset_rect):
        assert offset_rect.scaled(height=2, pivot=offset_rect.center) == Rect(20, 20, 40, 40)

    def test_scaled_by_scalar(self, offset_rect):
        assert offset_rect.scaled_by(0.5, pivot=offset_rect.center) == Rect(30, 35, 20, 10)

    def test_scaled_by_point_and_size(self, offset_rect):
        expected = offset_rect.scaled(2, 3, pivot=Point(0, 0))
        assert offset_rect.scaled_by(Point(2, 3), pivot=Point(0, 0)) == expected
        assert offset_rect.scaled_by(Size(2, 3), pivot=Point(0, 0)) == expected

    @pytest.mark.parametrize("factor", [2.0, 0.3, -1.5, 7.0])
    def test_scaling_is_reversible(self, offset_rect, pivot, factor):
        there = offset_rect.scaled_by(factor, pivot=pivot)
        back = there.scaled_by(1 / factor, pivot=pivot)
        assert_rect_close(back, offset_rect)


class TestInset:
    def test_inset_all_sides(self, container):
        assert container.inset(10) == Rect(10, 10, 80, 80)

    def test_inset_x(self, container):
        assert container.inset_x(10) == Rect(10, 0, 80, 100)

    def test_inset_y(self, container):
        assert container.inset_y(10) == Rect(0, 10, 100, 80)

    def test_negative_inset_grows(self, unit_rect):
        assert unit_rect.inset(-5) == Rect(-5, -5, 20, 20)

    def test_over_inset_propagates_negative_size(self, unit_rect):
        assert unit_rect.inset(6) == Rect(6, 6, -2, -2)


class TestIntersection:
    def test_overlap(self, container, offset_rect):
        assert container.intersection(Rect(90, 90, 20, 20)) == Rect(90, 90, 10, 10)
        assert container.intersection(offset_rect) == offset_rect

    def test_disjoint(self, container):
        assert container.intersection(Rect(200, 200, 5, 5)) is None
        assert not container.intersects(Rect(200, 200, 5, 5))

    def test_touching_edges_share_zero_area(self, container):
        assert container.intersection(Rect(100, 10, 5, 5)) == Rect(100, 10, 0, 5)


class TestAxisOverlap:
    def test_horizontal(self, unit_rect):
        assert unit_rect.intersects_horizontally(Rect(5, 500, 10, 10))
        assert not unit_rect.intersects_horizontally(Rect(10, 0, 10, 10))
        assert not unit_rect.intersects_horizontally(Rect(-20, 0, 5, 5))

    def test_vertical(self, unit_rect):
        assert unit_rect.intersects_vertically(Rect(500, 9, 10, 10))
        assert not unit_rect.intersects_vertically(Rect(0, 10, 10, 10))

    def test_containment_counts_as_overlap(self, container, unit_rect):
        assert container.intersects_horizontally(unit_rect.translated(40, 40))
        assert unit_rect.translated(40, 40).intersects_vertically(container)

    @pytest.mark.parametrize("other", [
        Rect(5, 5, 10, 10),
        Rect(10, 10, 1, 1),
        Rect(-3, -3, 2, 2),
        Rect(2, 2, 2, 2),
    ])
    def test_symmetric(self, unit_rect, other):
        assert unit_rect.intersects_horizontally(other) == other.intersects_horizontally(unit_rect)
        assert unit_rect.intersects_vertically(other) == other.intersects_vertically(unit_rect)


class TestBound:
    def test_expressed_in_container_space(self):
        container = Rect(50, 50, 100, 100)
        assert Rect(60, 70, 10, 10).bound_by(container) == Rect(10, 20, 10, 10)

    def test_partially_overlapping(self):
        container = Rect(50, 50, 100, 100)
        assert Rect(40, 40, 20, 20).bound_by(container) == Rect(-10, -10, 20, 20)

    def test_no_overlap(self):
        assert Rect(0, 0, 10, 10).bound_by(Rect(50, 50, 100, 100)) is None


class TestFlip:
    def test_horizontal(self, container):
        assert Rect(10, 20, 30, 5).flipped_horizontally(container) == Rect(60, 20, 30, 5)

    def test_vertical(self, container):
        assert Rect(10, 20, 30, 5).flipped_vertically(container) == Rect(10, 75, 30, 5)

    def test_both(self, container):
        assert Rect(10, 20, 30, 5).flipped(container) == Rect(60, 75, 30, 5)

    def test_offset_containment(self):
        containment = Rect(100, 100, 50, 50)
        assert Rect(105, 100, 10, 10).flipped_horizontally(containment) == Rect(135, 100, 10, 10)

    @pytest.mark.parametrize("containment", [
        Rect(0, 0, 100, 100),
        Rect(-40, 15, 60, 30),
    ])
    def test_flip_twice_restores(self, offset_rect, containment):
        assert offset_rect.flipped_horizontally(containment).flipped_horizontally(containment) == offset_rect
        assert offset_rect.flipped(containment).flipped(containment) == offset_rect


class TestOperators:
    def test_size_adjusts_extent(self, offset_rect):
        assert offset_rect + Size(5, 5) == Rect(20, 30, 45, 25)
        assert offset_rect - Size(5, 5) == Rect(20, 30, 35, 15)

    def test_point_adjusts_origin(self, offset_rect):
        assert offset_rect + Point(5, 5) == Rect(25, 35, 40, 20)
        assert offset_rect - Point(5, 5) == Rect(15, 25, 40, 20)

    def test_scalar(self, offset_rect):
        assert offset_rect * 2 == Rect(40, 60, 80, 40)
        assert 2 * offset_rect == Rect(40, 60, 80, 40)
        assert offset_rect / 2 == Rect(10, 15, 20, 10)

    def test_compound_assignment_matches_binary(self, offset_rect):
        for operand, op in [
            (Size(1, 2), "add"),
            (Point(1, 2), "add"),
            (Size(1, 2), "sub"),
            (Point(1, 2), "sub"),
        ]:
            r = offset_rect
            if op == "add":
                r += operand
                assert r == offset_rect + operand
            else:
                r -= operand
                assert r == offset_rect - operand
        r = offset_rect
        r *= 3
        assert r == offset_rect * 3
        r /= 3
        assert r == offset_rect

    def test_compound_assignment_does_not_touch_original(self, offset_rect):
        before = offset_rect
        r = offset_rect
        r += Point(1, 1)
        assert offset_rect == before == Rect(20, 30, 40, 20)

    def test_unsupported_operands(self, offset_rect):
        with pytest.raises(TypeError):
            offset_rect + 1
        with pytest.raises(TypeError):
            offset_rect * Point(1, 1)

    def test_division_by_zero_gives_inf_and_nan(self):
        r = Rect(1, 0, 2, 0) / 0
        assert math.isinf(r.x) and math.isinf(r.width)
        assert math.isnan(r.y) and math.isnan(r.height)


class TestRound:
    def test_half_away_from_zero(self):
        assert round(Rect(0.5, -0.5, 2.5, -2.5)) == Rect(1, -1, 3, -3)

    def test_nearest(self):
        assert round(Rect(1.2, 1.7, 9.49, 9.51)) == Rect(1, 2, 9, 10)

    def test_components_rounded_independently(self):
        # origin and size rounded separately, not the far edge
        r = round(Rect(0.4, 0.4, 0.4, 0.4))
        assert r == Rect(0, 0, 0, 0)

    def test_ndigits(self):
        assert_rect_close(round(Rect(1.25, 0, 0, 0), 1), Rect(1.3, 0, 0, 0))

    def test_returns_floats(self):
        r = round(Rect(1.5, 2, 3, 4))
        assert all(isinstance(v, float) for v in (r.x, r.y, r.width, r.height))

    def test_just_below_half_rounds_down(self):
        assert round(Rect(0.49999999999999994, -0.49999999999999994, 0, 0)) == Rect(0, 0, 0, 0)

    def test_large_odd_integer_is_unchanged(self):
        value = float(2**52 + 1)
        assert round(Rect(value, 0, value, 0)) == Rect(value, 0, value, 0)

    def test_huge_ndigits_leaves_rect_unchanged(self):
        assert round(Rect(1.5, -0.25, 3, 4), 400) == Rect(1.5, -0.25, 3, 4)
