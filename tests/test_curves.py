"""
Tests for yield curve processing
"""
import pytest

from fxarb.core.curves import (
    calculate_forward_rates,
    forward_rate,
    interpolate_curve,
    interpolate_rate,
    sort_curve_points,
    tenor_label,
    tenor_to_years,
)
from fxarb.core.errors import CurveError
from fxarb.core.models import CurveMethod, YieldCurvePoint


def point(tenor, years, rate):
    return YieldCurvePoint(tenor=tenor, years=years, rate=rate)


class TestTenors:
    """Test tenor conversions"""

    @pytest.mark.parametrize("tenor, years", [
        ("1D", 1 / 365),
        ("1W", 1 / 52),
        ("2W", 2 / 52),
        ("3M", 0.25),
        ("9M", 0.75),
        ("1Y", 1.0),
        ("30Y", 30.0),
        ("6m", 0.5),
    ])
    def test_tenor_to_years(self, tenor, years):
        """Test supported units"""
        assert tenor_to_years(tenor) == pytest.approx(years)

    @pytest.mark.parametrize("tenor", ["ON", "5Q", "", "XY"])
    def test_unknown_tenor_maps_to_zero(self, tenor):
        """Test unknown units and malformed values map to zero"""
        assert tenor_to_years(tenor) == 0.0

    @pytest.mark.parametrize("years, label", [
        (0.0, "0M"),
        (0.25, "3M"),
        (0.5, "6M"),
        (0.99, "12M"),
        (1.0, "1Y"),
        (10.0, "10Y"),
        (2.5, "2.50Y"),
        (7.3, "7.30Y"),
    ])
    def test_tenor_label(self, years, label):
        """Test months below a year, whole years, then two decimals"""
        assert tenor_label(years) == label

    def test_sort_curve_points(self):
        """Test sorting returns a new ordered list"""
        points = [point("5Y", 5, 4.5), point("1Y", 1, 5.0), point("2Y", 2, 4.8)]
        ordered = sort_curve_points(points)

        assert [p.years for p in ordered] == [1, 2, 5]
        assert points[0].tenor == "5Y"


class TestInterpolation:
    """Test linear resampling"""

    def setup_method(self):
        """Set up test fixtures"""
        self.flat_ends = [point("0M", 0.0, 5.0), point("10Y", 10.0, 3.0)]

    def test_resolution_one_returns_endpoints(self):
        """Test resolution 1 yields exactly the two endpoints"""
        result = interpolate_curve(self.flat_ends, resolution=1)

        assert len(result) == 2
        assert (result[0].years, result[0].rate) == (0.0, 5.0)
        assert (result[1].years, result[1].rate) == (10.0, 3.0)

    def test_midpoint(self):
        """Test the midpoint rate is the average of the ends"""
        result = interpolate_curve(self.flat_ends, resolution=2)

        assert result[1].years == 5.0
        assert result[1].rate == pytest.approx(4.0)
        assert result[1].tenor == "5Y"

    def test_point_count_and_spacing(self):
        """Test resolution + 1 evenly spaced points"""
        result = interpolate_curve(self.flat_ends, resolution=100)

        assert len(result) == 101
        steps = [b.years - a.years for a, b in zip(result, result[1:])]
        assert all(step == pytest.approx(0.1) for step in steps)

    def test_unsorted_input(self):
        """Test points are sorted before resampling"""
        points = [point("10Y", 10, 4.0), point("1Y", 1, 5.0), point("5Y", 5, 4.5)]
        result = interpolate_curve(points, resolution=9)

        assert result[0].years == 1
        assert result[-1].years == 10
        assert result[4].years == pytest.approx(5.0)
        assert result[4].rate == pytest.approx(4.5)

    def test_knots_reproduced(self):
        """Test input points are hit exactly on grid knots"""
        points = [point("1Y", 1, 5.0), point("2Y", 2, 6.0), point("3Y", 3, 5.5)]
        result = interpolate_curve(points, resolution=4)

        rates = [p.rate for p in result]
        assert rates == pytest.approx([5.0, 5.5, 6.0, 5.75, 5.5])

    def test_single_point_curve(self):
        """Test a single point resamples to a flat curve"""
        result = interpolate_curve([point("5Y", 5, 4.2)], resolution=3)

        assert len(result) == 4
        assert all(p.years == 5 and p.rate == 4.2 for p in result)

    def test_duplicate_years_use_lower_rate(self):
        """Test degenerate brackets return the lower rate unchanged"""
        points = [point("1Y", 1, 5.0), point("1Y", 1, 7.0)]
        assert interpolate_rate(points, 1.0) == 5.0

    def test_last_bracketing_pair_wins(self):
        """Test the last pair containing the target is used"""
        points = [point("1Y", 1, 5.0), point("2Y", 2, 6.0), point("2Y", 2, 8.0), point("3Y", 3, 9.0)]
        # Pairs (1,2), (2,2) and (2,3) all contain 2; the last one starts at 8.0
        assert interpolate_rate(points, 2.0) == 8.0

    @pytest.mark.parametrize("method", list(CurveMethod))
    def test_every_method_tag_is_linear(self, method):
        """Test method tags do not change the resampling"""
        result = interpolate_curve(self.flat_ends, resolution=2, method=method)
        assert result[1].rate == pytest.approx(4.0)

    def test_empty_curve_raises(self):
        """Test interpolation needs at least one point"""
        with pytest.raises(CurveError):
            interpolate_curve([], resolution=10)
        with pytest.raises(CurveError):
            interpolate_rate([], 1.0)

    def test_zero_resolution_raises(self):
        """Test resolution guard"""
        with pytest.raises(CurveError):
            interpolate_curve(self.flat_ends, resolution=0)


class TestForwardRates:
    """Test forward rate derivation"""

    def test_two_point_curve(self):
        """Test first point unchanged and second is the 1Y1Y forward"""
        zero = [point("1Y", 1, 5.0), point("2Y", 2, 6.0)]
        forwards = calculate_forward_rates(zero)

        assert forwards[0] == zero[0]
        assert forwards[1].tenor == "2Y"
        assert forwards[1].years == 2
        expected = ((1.06 ** 2 / 1.05 ** 1) - 1) / (2 - 1) * 100
        assert forwards[1].rate == pytest.approx(expected)
        assert forwards[1].rate == pytest.approx(7.0095, abs=1e-4)

    def test_first_point_is_a_copy(self):
        """Test the input point is not aliased"""
        zero = [point("1Y", 1, 5.0), point("2Y", 2, 6.0)]
        forwards = calculate_forward_rates(zero)
        assert forwards[0] is not zero[0]

    def test_flat_curve(self):
        """Test a flat annual-compounded curve over one-year steps"""
        zero = [point("1Y", 1, 4.0), point("2Y", 2, 4.0), point("3Y", 3, 4.0)]
        forwards = calculate_forward_rates(zero)

        assert [p.rate for p in forwards] == pytest.approx([4.0, 4.0, 4.0])

    def test_unsorted_input(self):
        """Test points are sorted before derivation"""
        zero = [point("2Y", 2, 6.0), point("1Y", 1, 5.0)]
        forwards = calculate_forward_rates(zero)

        assert [p.tenor for p in forwards] == ["1Y", "2Y"]

    def test_equal_years_raise(self):
        """Test equal year fractions are rejected instead of dividing by zero"""
        zero = [point("1Y", 1, 5.0), point("12M", 1, 5.1)]
        with pytest.raises(CurveError):
            calculate_forward_rates(zero)

    def test_single_point_raises(self):
        """Test at least two points are needed"""
        with pytest.raises(CurveError):
            calculate_forward_rates([point("1Y", 1, 5.0)])

    def test_forward_rate_function(self):
        """Test the pairwise helper"""
        assert forward_rate(0.0, 3.0, 1.0, 4.0) == pytest.approx(4.0)
        with pytest.raises(CurveError):
            forward_rate(2.0, 3.0, 2.0, 4.0)

    def test_rate_below_minus_100_raises(self):
        """Test rates that cannot compound are rejected instead of going complex"""
        zero = [point("6M", 0.5, -150.0), point("18M", 1.5, 5.0)]
        with pytest.raises(CurveError, match="above -100%"):
            calculate_forward_rates(zero)

        with pytest.raises(CurveError):
            forward_rate(0.0, -100.0, 1.0, 4.0)

    def test_forward_rate_overflow_raises(self):
        """Test huge year fractions raise a curve error"""
        with pytest.raises(CurveError, match="overflows"):
            forward_rate(1.0, 5.0, 1e6, 5.0)
