import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

class ProfilePlotter:
    def __init__(self, run_name="s_curve"):
        self.run_name = run_name

    def summarize(self, history):
        """统计峰值加速度、终点速度和总时长"""
        t = np.array(history["t"], dtype=float)
        v = np.array(history["v"], dtype=float)
        a = np.array(history["a"], dtype=float)
        return {
            "samples": len(t),
            "duration": float(t[-1]) if len(t) else 0.0,
            "v_final": float(v[-1]) if len(v) else 0.0,
            "a_peak": float(np.max(np.abs(a))) if len(a) else 0.0,
            "v_range": (float(np.min(v)), float(np.max(v))) if len(v) else (0.0, 0.0),
        }

    def plot(self, history, save_path=None):
        """
        画出速度 / 加速度曲线，并输出数值统计
        """
        if save_path is None:
            save_path = f"{self.run_name}_result.png"

        t = np.array(history["t"])
        v = np.array(history["v"])
        a = np.array(history["a"])

        stats = self.summarize(history)
        print(f"\n📊 --- {self.run_name} 轨迹统计 ---")
        print(f"{'采样点数':<10} | {stats['samples']}")
        print(f"{'总时长':<10} | {stats['duration']:.4f}")
        print(f"{'终点速度':<10} | {stats['v_final']:.4f}")
        print(f"{'峰值加速度':<10} | {stats['a_peak']:.4f}")
        print("-" * 30)

        fig, axes = plt.subplots(2, 1, figsize=(10, 8), sharex=True)
        fig.suptitle(f"S-Curve Profile: {self.run_name}", fontsize=16)

        ax = axes[0]
        ax.plot(t, v, 'b-', lw=1.5)
        ax.set_ylabel("Velocity")
        ax.set_title("Velocity", fontsize=12, fontweight='bold')
        ax.grid(True, alpha=0.3)

        ax = axes[1]
        ax.plot(t, a, 'g-', lw=1.5)
        ax.axhline(0, color='r', linestyle=':', alpha=0.5)
        ax.set_ylabel("Acceleration")
        ax.set_title("Acceleration", fontsize=12, fontweight='bold')
        ax.grid(True, alpha=0.3)

        axes[-1].set_xlabel("Time")
        plt.tight_layout()

        print(f"💾 正在保存结果图表到: {save_path} ...")
        plt.savefig(save_path, dpi=200)
        print(f"✅ 保存成功！")
        plt.close(fig)
        return stats
