import math
from dataclasses import dataclass
from typing import NamedTuple, Optional

# ==============================================================================
# 数据类型
# ==============================================================================
class SampleResult(NamedTuple):
    """单次采样结果: (completed, velocity, acceleration)，可直接解包"""
    completed: bool
    velocity: float
    acceleration: float


@dataclass(frozen=True)
class TrajectoryParams:
    """
    S 曲线速度轨迹参数
    注意: a_limit / j_limit 必须为负数 (沿用控制器侧的符号约定)
    """
    v_start: float
    v_target: float
    a_limit: float
    j_limit: float

    @classmethod
    def from_limits(cls, v_start, v_target, a_max, j_max):
        """用正的加速度/加加速度幅值构造参数，内部取负"""
        return cls(float(v_start), float(v_target), -abs(float(a_max)), -abs(float(j_max)))


@dataclass(frozen=True)
class PhaseSpec:
    """
    三个阶段 (凹 / 线性 / 凸) 的派生参数，只依赖 TrajectoryParams
    """
    direction: float
    jerk_concave: float
    jerk_convex: float
    v1: float       # 凹 -> 线性 的速度
    v2: float       # 线性 -> 凸 的速度
    a1: float       # 峰值加速度 (带方向)
    t1: float
    t2: float
    t_end: float


# ==============================================================================
# 阶段计算
# ==============================================================================
def evaluate_phase(v0, a0, jerk, t):
    """
    恒定 jerk 阶段内的速度 / 加速度
    :param v0: 阶段起始速度
    :param a0: 阶段起始加速度
    :param jerk: 本阶段的 jerk
    :param t: 相对于阶段起点的时间
    :return: (velocity, acceleration)
    """
    velocity = v0 + (a0 * t) + ((jerk * t * t) / 2.0)
    acceleration = a0 + (jerk * t)
    return velocity, acceleration


def phase_displacement(v0, a0, jerk, t):
    """阶段内走过的位移: v0*t + a0*t^2/2 + j*t^3/6"""
    return (v0 * t) + ((a0 * t * t) / 2.0) + ((jerk * t * t * t) / 6.0)


def _is_degenerate(v_start, v_target, a_limit, j_limit):
    if not all(math.isfinite(x) for x in (v_start, v_target, a_limit, j_limit)):
        return True
    return (v_start == v_target) or (0.0 <= a_limit) or (0.0 <= j_limit)


def plan_phases(v_start, v_target, a_limit, j_limit) -> Optional[PhaseSpec]:
    """
    推导三段式 S 曲线的阶段边界
    输入不合法 (或数值上退化) 时返回 None，调用方按 "已完成" 处理
    """
    if _is_degenerate(v_start, v_target, a_limit, j_limit):
        return None

    # 公式里只使用幅值
    a_mag = -a_limit
    j_mag = -j_limit

    # 凹 / 凸阶段各自贡献的速度变化
    half_delta = abs(v_target - v_start) / 2.0
    accel_limited_delta = (a_mag * a_mag) / (2.0 * j_mag)
    phase_delta = min(accel_limited_delta, half_delta)

    direction = 1.0 if v_start < v_target else -1.0

    v1 = v_start + (direction * phase_delta)
    v2 = v_target - (direction * phase_delta)

    jerk_concave = direction * j_mag
    jerk_convex = direction * (-j_mag)

    a1 = direction * math.sqrt(phase_delta * 2.0 * abs(jerk_concave))
    if a1 == 0.0:
        # a_limit^2 或 phase_delta 下溢，轨迹无法推进
        return None

    dur_concave = abs(a1 / jerk_concave)
    dur_linear = abs((v2 - v1) / a1)
    dur_convex = dur_concave

    t1 = dur_concave
    t2 = t1 + dur_linear
    t_end = t2 + dur_convex
    if not all(math.isfinite(x) for x in (v1, v2, a1, t1, t2, t_end)):
        return None

    return PhaseSpec(direction, jerk_concave, jerk_convex, v1, v2, a1, t1, t2, t_end)


def sample_phases(spec: PhaseSpec, v_start, v_target, t) -> SampleResult:
    """
    按时间选择当前阶段并求值
    边界归属: [0, t1] 凹, (t1, t2) 线性, [t2, t_end] 凸
    """
    if 0.0 <= t <= spec.t1:
        vt, at = evaluate_phase(v_start, 0.0, spec.jerk_concave, t)
    elif spec.t1 < t < spec.t2:
        vt, at = evaluate_phase(spec.v1, spec.a1, 0.0, t - spec.t1)
    elif spec.t2 <= t <= spec.t_end:
        vt, at = evaluate_phase(spec.v2, spec.a1, spec.jerk_convex, t - spec.t2)
    else:
        return SampleResult(True, v_target, 0.0)
    return SampleResult(False, vt, at)


# ==============================================================================
# 轨迹求值入口
# ==============================================================================
def evaluate_trajectory(v_start, v_target, a_limit, j_limit, t) -> SampleResult:
    """
    S 曲线速度规划: 计算轨迹开始后 t 时刻的速度和加速度
    输入不合法时不抛异常，直接返回 (True, v_start, 0.0)，即 "保持当前状态"
    """
    spec = plan_phases(v_start, v_target, a_limit, j_limit)
    if spec is None or not (t >= 0.0):
        return SampleResult(True, v_start, 0.0)
    return sample_phases(spec, v_start, v_target, t)


def evaluate(params: TrajectoryParams, t) -> SampleResult:
    return evaluate_trajectory(params.v_start, params.v_target,
                               params.a_limit, params.j_limit, t)
