"""Tests for normalization helpers."""
import math

import pytest

from tick_progress import NORMALIZERS, Normalization, smoothstep
from tick_progress.easing import clamp, clamp01, inverse, midway, normalize, ratio


class TestClamp:
    """Test clamp and clamp01."""

    def test_clamp_inside_range(self):
        """Values inside the range are returned unchanged."""
        assert clamp(3.0, 0.0, 10.0) == 3.0

    def test_clamp_below_and_above(self):
        """Values outside the range snap to the nearest bound."""
        assert clamp(-1.0, 0.0, 10.0) == 0.0
        assert clamp(11.0, 0.0, 10.0) == 10.0

    def test_clamp01_bounds(self):
        """clamp01 bounds to the unit interval."""
        assert clamp01(-0.5) == 0.0
        assert clamp01(0.25) == 0.25
        assert clamp01(1.5) == 1.0

    def test_clamp_passes_nan_through(self):
        """nan compares false against both bounds and is returned as-is."""
        assert math.isnan(clamp01(math.nan))


class TestSmoothstep:
    """Test the cubic smoothstep."""

    def test_endpoints_and_midpoint(self):
        """smoothstep fixes 0, 0.5 and 1."""
        assert smoothstep(0.0) == 0.0
        assert smoothstep(0.5) == 0.5
        assert smoothstep(1.0) == 1.0

    def test_quarter(self):
        """smoothstep(0.25) == 3t^2 - 2t^3 == 0.15625."""
        assert abs(smoothstep(0.25) - 0.15625) < 1e-9

    def test_out_of_range_inputs_are_clamped(self):
        """Inputs outside [0, 1] behave as the nearest bound."""
        assert smoothstep(-3.0) == 0.0
        assert smoothstep(2.5) == 1.0

    def test_monotonic_on_unit_interval(self):
        """smoothstep never decreases across [0, 1]."""
        values = [smoothstep(i / 20) for i in range(21)]
        assert values == sorted(values)


class TestNormalizers:
    """Test the policy table and normalize()."""

    def test_table_covers_every_policy(self):
        """Each Normalization has a normalizer."""
        assert set(NORMALIZERS) == set(Normalization)

    def test_clamp_policy_stays_in_unit_range(self):
        """CLAMP keeps every ratio for current in [0, target] inside [0, 1]."""
        for target in (0.5, 1.0, 7.0, 100.0):
            for i in range(11):
                current = target * i / 10
                value = normalize(current, target, Normalization.CLAMP)
                assert 0.0 <= value <= 1.0

    def test_unlimited_policy_passes_ratio_through(self):
        """UNLIMITED returns the raw ratio, even beyond [0, 1]."""
        assert normalize(15.0, 10.0, Normalization.UNLIMITED) == 1.5
        assert normalize(-5.0, 10.0, Normalization.UNLIMITED) == -0.5

    def test_smooth_clamp_policy(self):
        """SMOOTH_CLAMP applies smoothstep to the ratio."""
        assert normalize(5.0, 10.0, Normalization.SMOOTH_CLAMP) == 0.5
        assert normalize(20.0, 10.0, Normalization.SMOOTH_CLAMP) == 1.0

    def test_policy_from_string(self):
        """Normalization accepts its string values."""
        assert Normalization("smooth_clamp") is Normalization.SMOOTH_CLAMP
        with pytest.raises(ValueError):
            Normalization("bogus")


class TestZeroTarget:
    """A zero target follows floating-point division semantics."""

    def test_positive_over_zero_is_inf(self):
        assert ratio(3.0, 0.0) == math.inf

    def test_negative_over_zero_is_negative_inf(self):
        assert ratio(-3.0, 0.0) == -math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(ratio(0.0, 0.0))

    def test_clamp_maps_inf_to_one(self):
        """CLAMP turns an infinite ratio into full progress."""
        assert normalize(3.0, 0.0, Normalization.CLAMP) == 1.0

    def test_clamp_keeps_nan(self):
        assert math.isnan(normalize(0.0, 0.0, Normalization.CLAMP))


class TestInverseAndMidway:
    """Test inverse and midway."""

    def test_inverse_sums_to_one(self):
        """inverse(p) + p == 1 for any p, including outside [0, 1]."""
        for p in (-0.5, 0.0, 0.3, 1.0, 2.5):
            assert abs(inverse(p) + p - 1.0) < 1e-9

    def test_midway_endpoints_and_peak(self):
        """midway is 0 at both ends and 1 at the middle."""
        assert midway(0.0) == 0.0
        assert midway(1.0) == 0.0
        assert midway(0.5) == 1.0

    def test_midway_symmetric(self):
        """midway(0.5 - d) == midway(0.5 + d)."""
        for d in (0.1, 0.2, 0.25, 0.4):
            assert abs(midway(0.5 - d) - midway(0.5 + d)) < 1e-9
