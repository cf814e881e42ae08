"""Tests for the S-curve phase evaluator and trajectory planner."""

import math

import numpy as np
import pytest

from scurve_control.planning.s_curve import (
    TrajectoryParams,
    SampleResult,
    evaluate,
    evaluate_phase,
    evaluate_trajectory,
    phase_displacement,
    plan_phases,
)


class TestEvaluatePhase:

    def test_constant_jerk(self):
        v, a = evaluate_phase(1.0, 2.0, 4.0, 3.0)
        assert v == pytest.approx(1.0 + 6.0 + 18.0)
        assert a == pytest.approx(14.0)

    def test_zero_time_returns_start(self):
        assert evaluate_phase(7.0, -3.0, 5.0, 0.0) == (7.0, -3.0)

    def test_zero_jerk_is_linear(self):
        v, a = evaluate_phase(450.0, -10.0, 0.0, 20.0)
        assert v == pytest.approx(250.0)
        assert a == -10.0

    def test_displacement(self):
        assert phase_displacement(500.0, 0.0, -1.0, 10.0) == pytest.approx(5000.0 - 1000.0 / 6.0)


class TestDegenerateInput:

    def test_equal_velocities(self):
        assert evaluate_trajectory(5, 5, -1, -1, 0) == (True, 5, 0)

    def test_non_negative_acceleration_limit(self):
        assert evaluate_trajectory(0, 10, 1, -1, 0) == (True, 0, 0)
        assert evaluate_trajectory(0, 10, 0.0, -1, 0) == (True, 0, 0)

    def test_non_negative_jerk(self):
        assert evaluate_trajectory(0, 10, -1, 0.0, 3.0) == (True, 0, 0)

    def test_negative_elapsed(self):
        assert evaluate_trajectory(0, 10, -1, -1, -0.5) == (True, 0, 0)

    def test_nan_elapsed(self):
        assert evaluate_trajectory(0, 10, -1, -1, float("nan")) == (True, 0, 0)

    def test_infinite_limit(self):
        assert evaluate_trajectory(0, 10, float("-inf"), -1, 1.0) == (True, 0, 0)

    def test_underflowing_acceleration(self):
        """a_limit^2 underflows to zero: no division by zero, hold start velocity."""
        assert plan_phases(0.0, 10.0, -1e-200, -1.0) is None
        assert evaluate_trajectory(0.0, 10.0, -1e-200, -1.0, 1.0) == (True, 0.0, 0.0)

    def test_returns_sample_result(self):
        result = evaluate_trajectory(5, 5, -1, -1, 0)
        assert isinstance(result, SampleResult)
        assert result.completed is True


class TestTotality:

    def test_random_finite_inputs(self):
        rng = np.random.default_rng(42)
        exps = rng.integers(-300, 300, size=(500, 5))
        signs = rng.choice([-1.0, 1.0], size=(500, 5))
        values = signs * rng.random((500, 5)) * 10.0 ** exps
        for row in values:
            completed, v, a = evaluate_trajectory(*[float(x) for x in row])
            assert isinstance(completed, bool)
            assert not math.isnan(a)

    def test_huge_velocity_span(self):
        result = evaluate_trajectory(-1e308, 1e308, -1e308, -1e-308, 1.0)
        assert result == (True, -1e308, 0.0)


class TestPhaseBoundaries:

    def test_reference_boundaries(self, braking_params):
        p = braking_params
        spec = plan_phases(p.v_start, p.v_target, p.a_limit, p.j_limit)
        assert spec.direction == -1.0
        assert spec.v1 == pytest.approx(450.0)
        assert spec.v2 == pytest.approx(50.0)
        assert spec.a1 == pytest.approx(-10.0)
        assert (spec.t1, spec.t2, spec.t_end) == pytest.approx((10.0, 50.0, 60.0))

    def test_accelerating_profile(self):
        spec = plan_phases(0.0, 100.0, -10.0, -2.0)
        assert spec.direction == 1.0
        assert spec.jerk_concave == 2.0
        assert spec.jerk_convex == -2.0
        assert spec.a1 == pytest.approx(10.0)
        assert (spec.t1, spec.t2, spec.t_end) == pytest.approx((5.0, 10.0, 15.0))

    def test_no_linear_phase_when_limit_not_reached(self, short_params):
        p = short_params
        spec = plan_phases(p.v_start, p.v_target, p.a_limit, p.j_limit)
        assert spec.t2 == pytest.approx(spec.t1)
        assert spec.a1 == pytest.approx(math.sqrt(10.0))
        assert spec.t_end == pytest.approx(2.0 * math.sqrt(10.0))

    def test_boundary_instants_belong_to_curved_phases(self, braking_params):
        """t1 is evaluated with the concave jerk, t2 with the convex jerk."""
        p = braking_params
        assert evaluate(p, 10.0) == (False, *evaluate_phase(500.0, 0.0, -1.0, 10.0))
        assert evaluate(p, 50.0) == (False, *evaluate_phase(50.0, -10.0, 1.0, 0.0))
        assert evaluate(p, 60.0).completed is False
        assert evaluate(p, 60.0 + 1e-9) == (True, 0.0, 0.0)

    @pytest.mark.parametrize("params", [
        (500.0, 0.0, -10.0, -1.0),
        (0.0, 100.0, -10.0, -2.0),
        (-3.0, 7.5, -0.5, -0.25),
    ])
    def test_continuity(self, params):
        spec = plan_phases(*params)
        eps = 1e-9
        for boundary in (spec.t1, spec.t2):
            _, v_lo, a_lo = evaluate_trajectory(*params, boundary - eps)
            _, v_hi, a_hi = evaluate_trajectory(*params, boundary + eps)
            assert v_lo == pytest.approx(v_hi, abs=1e-6)
            assert a_lo == pytest.approx(a_hi, abs=1e-6)


class TestProfileShape:

    def test_reference_values(self, braking_params):
        p = braking_params
        assert evaluate(p, 0.0) == (False, 500.0, 0.0)
        assert evaluate(p, 5.0)[1:] == pytest.approx((487.5, -5.0))
        assert evaluate(p, 30.0)[1:] == pytest.approx((250.0, -10.0))
        assert evaluate(p, 55.0)[1:] == pytest.approx((12.5, -5.0))
        assert evaluate(p, 60.0)[1:] == pytest.approx((0.0, 0.0))

    def test_terminal_value_is_exact(self, braking_params):
        for t in (60.5, 100.0, 1e9):
            assert evaluate(braking_params, t) == (True, 0.0, 0.0)

    def test_completion_is_monotonic(self, short_params):
        ts = np.linspace(0.0, 10.0, 2001)
        flags = [evaluate(short_params, float(t)).completed for t in ts]
        first = flags.index(True)
        assert all(flags[first:])
        assert not any(flags[:first])

    @pytest.mark.parametrize("v0, vs", [(500.0, 0.0), (3.0, 40.0), (-12.0, 2.0)])
    def test_reflection_symmetry(self, v0, vs):
        for t in np.linspace(0.0, 80.0, 161):
            _, v, a = evaluate_trajectory(v0, vs, -10.0, -1.0, float(t))
            _, v_neg, a_neg = evaluate_trajectory(-v0, -vs, -10.0, -1.0, float(t))
            assert v_neg == pytest.approx(-v)
            assert a_neg == pytest.approx(-a)


class TestTrajectoryParams:

    def test_from_limits_negates(self):
        p = TrajectoryParams.from_limits(500, 0, 10, 1)
        assert p == TrajectoryParams(500.0, 0.0, -10.0, -1.0)

    def test_from_limits_matches_kernel_convention(self):
        p = TrajectoryParams.from_limits(0.0, 100.0, 10.0, 2.0)
        assert evaluate(p, 7.0) == evaluate_trajectory(0.0, 100.0, -10.0, -2.0, 7.0)

    def test_immutable(self, braking_params):
        with pytest.raises(AttributeError):
            braking_params.v_start = 1.0
