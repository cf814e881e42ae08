import csv
import math
import time

from scurve_control.planning.s_curve import TrajectoryParams, evaluate

CSV_HEADER = ("t", "v", "a")


def iter_samples(params: TrajectoryParams, dt=0.2, max_steps=None):
    """
    采样驱动: 从 t=0 开始按 dt 递增调用轨迹求值，直到报告完成
    完成时的那一帧也会输出 (与控制循环 "先输出后判断" 的习惯一致)
    :yield: (t, SampleResult)
    """
    if not math.isfinite(dt) or dt <= 0:
        raise ValueError(f"dt must be a positive finite number, got {dt}")

    t = 0.0
    steps = 0
    while True:
        if max_steps is not None and steps >= max_steps:
            raise RuntimeError(f"trajectory not completed after {max_steps} steps")
        result = evaluate(params, t)
        yield t, result
        steps += 1
        if result.completed:
            break
        t += dt


class SampleRunner:
    def __init__(self, params: TrajectoryParams):
        self.params = params
        self.history = {"t": [], "v": [], "a": []}

    def run(self, dt=0.2, max_steps=None, verbose=True):
        """
        Args:
            dt: 采样步长
            max_steps: 最大采样次数，None 表示直到完成
            verbose: 是否打印进度信息
        """
        p = self.params
        if verbose:
            print(f"🚀 开始采样: v {p.v_start} -> {p.v_target} (dt={dt})")

        start_wall_time = time.time()
        for t, (_, vt, at) in iter_samples(p, dt=dt, max_steps=max_steps):
            self.history["t"].append(t)
            self.history["v"].append(vt)
            self.history["a"].append(at)

        if verbose:
            n = len(self.history["t"])
            print(f"⏱️ 采样完成！共 {n} 帧，耗时: {time.time() - start_wall_time:.4f}s")
        return self.history


def write_csv(history, path):
    """按 t,v,a 三列写出，保留两位小数"""
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for t, v, a in zip(history["t"], history["v"], history["a"]):
            writer.writerow([f"{t:.2f}", f"{v:.2f}", f"{a:.2f}"])
    print(f"💾 CSV 已保存到: {path}")
