"""Pytest fixtures for S-curve planner tests."""

import matplotlib
matplotlib.use('Agg')

import pytest

from scurve_control.planning.s_curve import TrajectoryParams
from scurve_control.planning.trajectory_generator import SCurveVelocityTrajectory


@pytest.fixture
def braking_params() -> TrajectoryParams:
    """500 -> 0 with |a| <= 10, |j| = 1: t1=10, t2=50, t_end=60."""
    return TrajectoryParams(500.0, 0.0, -10.0, -1.0)


@pytest.fixture
def short_params() -> TrajectoryParams:
    """0 -> 10: never reaches the acceleration limit, no linear phase."""
    return TrajectoryParams(0.0, 10.0, -10.0, -1.0)


@pytest.fixture
def braking_traj(braking_params) -> SCurveVelocityTrajectory:
    p = braking_params
    return SCurveVelocityTrajectory(p.v_start, p.v_target, p.a_limit, p.j_limit)
