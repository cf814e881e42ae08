import numpy as np
import matplotlib.pyplot as plt

from scurve_control.planning.s_curve import (
    TrajectoryParams,
    SampleResult,
    evaluate_phase,
    phase_displacement,
    plan_phases,
    sample_phases,
)

# ==============================================================================
# 基类定义
# ==============================================================================
class TrajectoryGenerator:
    def __init__(self, duration=10.0, dt=0.001):
        """
        轨迹生成器基类
        :param duration: 轨迹总时长
        :param dt: 采样时间步长
        """
        self.duration = duration
        self.dt = dt

    @property
    def time_steps(self):
        """时间轴 (包含终点)，画图时才生成"""
        return np.arange(0, self.duration + self.dt, self.dt)

    def print_info(self):
        """标准化的轨迹信息打印"""
        print("\n" + "="*50)
        print(f"📍 轨迹配置信息: {self.__class__.__name__}")
        print(f"   - 总时长: {self.duration:.4f}")
        print(f"   - 采样步长: {self.dt}")
        if hasattr(self, 'params'):
            p = self.params
            print(f"   - 速度: {p.v_start} -> {p.v_target}")
            print(f"   - 加速度限制: {p.a_limit}, jerk: {p.j_limit}")
        print("="*50 + "\n")

    def get_state(self, t):
        """
        获取 t 时刻的状态
        :return: position, velocity, acceleration
        """
        raise NotImplementedError("子类必须实现 get_state 方法")

    def plot_trajectory(self, filename="s_curve_check.png"):
        """
        [调试工具] 自动遍历时间轴，画出位置、速度、加速度曲线
        """
        ps, vs, accs = [], [], []
        for t in self.time_steps:
            p, v, a = self.get_state(t)
            ps.append(p)
            vs.append(v)
            accs.append(a)

        fig, axes = plt.subplots(3, 1, figsize=(10, 10), sharex=True)

        titles = ["Position", "Velocity", "Acceleration"]
        for ax, data, title in zip(axes, [ps, vs, accs], titles):
            ax.plot(self.time_steps, data)
            ax.set_title(title)
            ax.grid(True)

        axes[-1].set_xlabel("Time")
        plt.tight_layout()
        plt.savefig(filename)
        plt.close(fig)
        print(f"✅ 轨迹检查图已保存至 {filename}")


# ==============================================================================
# S 曲线速度轨迹
# ==============================================================================
class SCurveVelocityTrajectory(TrajectoryGenerator):
    """
    单轴 S 曲线 (jerk 受限) 速度轨迹
    阶段参数在构造时算一次，之后每次采样只做阶段选择和多项式求值
    """
    def __init__(self, v_start, v_target, a_limit, j_limit, dt=0.2):
        self.params = TrajectoryParams(v_start, v_target, a_limit, j_limit)
        self.spec = plan_phases(v_start, v_target, a_limit, j_limit)
        super().__init__(self.get_t_end(), dt)

        # 各阶段起点的位置，用于累加位移
        self._p1 = 0.0
        self._p2 = 0.0
        self._p_end = 0.0
        if self.spec is not None:
            s = self.spec
            self._p1 = phase_displacement(v_start, 0.0, s.jerk_concave, s.t1)
            self._p2 = self._p1 + phase_displacement(s.v1, s.a1, 0.0, s.t2 - s.t1)
            self._p_end = self._p2 + phase_displacement(s.v2, s.a1, s.jerk_convex, s.t_end - s.t2)

    @classmethod
    def from_limits(cls, v_start, v_target, a_max, j_max, dt=0.2):
        """正幅值接口"""
        p = TrajectoryParams.from_limits(v_start, v_target, a_max, j_max)
        return cls(p.v_start, p.v_target, p.a_limit, p.j_limit, dt=dt)

    @property
    def is_degenerate(self):
        return self.spec is None

    def get_t_end(self):
        return 0.0 if self.spec is None else self.spec.t_end

    def sample(self, t) -> SampleResult:
        p = self.params
        if self.spec is None or not (t >= 0.0):
            return SampleResult(True, p.v_start, 0.0)
        return sample_phases(self.spec, p.v_start, p.v_target, t)

    def is_completed(self, t):
        return self.sample(t).completed

    def phase_at(self, t):
        """返回 t 时刻所在阶段: 'concave' / 'linear' / 'convex' / 'completed'"""
        if self.spec is None or not (t >= 0.0):
            return "completed"
        s = self.spec
        if t <= s.t1:
            return "concave"
        if t < s.t2:
            return "linear"
        if t <= s.t_end:
            return "convex"
        return "completed"

    def get_position(self, t):
        """从轨迹起点开始累计的位移"""
        phase = self.phase_at(t)
        p, s = self.params, self.spec
        if phase == "concave":
            return phase_displacement(p.v_start, 0.0, s.jerk_concave, t)
        if phase == "linear":
            return self._p1 + phase_displacement(s.v1, s.a1, 0.0, t - s.t1)
        if phase == "convex":
            return self._p2 + phase_displacement(s.v2, s.a1, s.jerk_convex, t - s.t2)
        if s is None:
            # 无效输入: 保持起始速度匀速运动
            return p.v_start * max(t, 0.0)
        # 完成之后按目标速度继续匀速运动
        if t > s.t_end:
            return self._p_end + p.v_target * (t - s.t_end)
        return 0.0

    def travel_distance(self):
        """整个加减速过程的总位移"""
        return self._p_end

    def get_state(self, t):
        _, vt, at = self.sample(t)
        return self.get_position(t), vt, at


# ==============================================================================
# 单元测试 (直接运行此文件进行测试)
# ==============================================================================
if __name__ == "__main__":
    print("🧪 正在测试 S 曲线轨迹模块...")

    traj = SCurveVelocityTrajectory(v_start=500.0, v_target=0.0, a_limit=-10.0, j_limit=-1.0)
    traj.print_info()

    s = traj.spec
    print(f"📍 阶段边界: t1={s.t1:.2f}, t2={s.t2:.2f}, t_end={s.t_end:.2f}")
    print(f"📍 总位移: {traj.travel_distance():.2f}")

    # evaluate_phase 用于单独检查某个阶段
    print(f"📍 凹阶段末端: {evaluate_phase(500.0, 0.0, s.jerk_concave, s.t1)}")

    traj.plot_trajectory("test_s_curve_traj.png")
