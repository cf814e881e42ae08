"""
Jerk-limited (S-curve) velocity trajectory planning.
"""
from scurve_control.planning.s_curve import (
    TrajectoryParams,
    PhaseSpec,
    SampleResult,
    evaluate_phase,
    evaluate_trajectory,
    plan_phases,
)

__all__ = [
    'TrajectoryParams',
    'PhaseSpec',
    'SampleResult',
    'evaluate_phase',
    'evaluate_trajectory',
    'plan_phases',
]
