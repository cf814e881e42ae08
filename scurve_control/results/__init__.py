# scurve_control/results/__init__.py
from pathlib import Path

RESULTS_ROOT = Path(__file__).resolve().parent  # .../scurve_control/results


def get_result_fig_dir():
    fig_dir = RESULTS_ROOT / "figs"
    fig_dir.mkdir(parents=True, exist_ok=True)
    return str(fig_dir)
