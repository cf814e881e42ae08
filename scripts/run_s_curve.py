import argparse
import os
import sys

sys.path.append(os.getcwd())

from scurve_control.planning.s_curve import TrajectoryParams, plan_phases
from scurve_control.utils.sampler import SampleRunner, write_csv, CSV_HEADER
from scurve_control.utils.plotter import ProfilePlotter
from scurve_control.results import get_result_fig_dir

# 默认场景: 速度 500 -> 0，加速度限制 10，jerk 1 (控制器约定为负数)
# 反向运动 (速度过零) 必须拆成两段轨迹，在零速度点衔接
V_START = 500.0
V_TARGET = 0.0
A_LIMIT = -10.0
J_LIMIT = -1.0
DT = 0.2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Sample an S-curve velocity trajectory until it completes.")
    parser.add_argument("--v0", type=float, default=V_START, help="Initial velocity")
    parser.add_argument("--vs", type=float, default=V_TARGET, help="Target velocity")
    parser.add_argument("--as", dest="a_limit", type=float, default=A_LIMIT, help="Acceleration limit (negative)")
    parser.add_argument("--jm", dest="j_limit", type=float, default=J_LIMIT, help="Jerk value (negative)")
    parser.add_argument("--dt", type=float, default=DT, help="Sampling step")
    parser.add_argument("--magnitude", action="store_true", help="Treat --as/--jm as positive magnitudes")
    parser.add_argument("--csv", default=None, help="Write t,v,a samples to this file instead of stdout")
    parser.add_argument("--plot", action="store_true", help="Save a velocity/acceleration figure")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.magnitude:
        params = TrajectoryParams.from_limits(args.v0, args.vs, args.a_limit, args.j_limit)
    else:
        params = TrajectoryParams(args.v0, args.vs, args.a_limit, args.j_limit)

    print(f"[in] v0:<{params.v_start:.2f}> vs:<{params.v_target:.2f}> "
          f"as:<{params.a_limit:.2f}> jm:<{params.j_limit:.2f}>\n")

    if plan_phases(params.v_start, params.v_target, params.a_limit, params.j_limit) is None:
        print("⚠️ 输入参数无效或速度无需变化，轨迹立即完成")

    runner = SampleRunner(params)
    history = runner.run(dt=args.dt, verbose=args.csv is not None)

    if args.csv is not None:
        write_csv(history, args.csv)
    else:
        print(",".join(CSV_HEADER))
        for t, v, a in zip(history["t"], history["v"], history["a"]):
            print(f"{t:.2f},{v:.2f},{a:.2f}")

    if args.plot:
        fig_path = os.path.join(get_result_fig_dir(), "s_curve_profile.png")
        ProfilePlotter(run_name="s_curve").plot(history, save_path=fig_path)


if __name__ == "__main__":
    main()
