"""
Convergence plots for refinement sweep results.

Reads the tidy metrics CSV written by ``fea1d.experiments.sweep_convergence``
and plots value and gradient errors against the element width on log-log axes,
annotated with the observed convergence rates.
"""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib
import numpy as np

matplotlib.use("Agg")  # headless-safe
import matplotlib.pyplot as plt

from fea1d.experiments.sweep_convergence import estimate_rate


def load_csv(path: str):
    """Load CSV data with proper handling of mixed data types."""
    arr = np.genfromtxt(path, delimiter=",", names=True, dtype=None, encoding=None)
    return np.atleast_1d(arr)

def lineplot(ax, xs, ys, label):
    """Create line plot with markers, properly sorted by x-values."""
    xs = np.array(xs, dtype=float); ys = np.array(ys, dtype=float)
    idx = np.argsort(xs); xs, ys = xs[idx], ys[idx]
    ax.plot(xs, ys, marker="o", label=label)

def plot_metrics(csv_path: str, out: str):
    """
    Plot L2 errors against h, one line per (field, quantity).

    Returns:
        Path of the saved figure
    """
    outdir = Path(out); outdir.mkdir(parents=True, exist_ok=True)
    data = load_csv(csv_path)

    fig, ax = plt.subplots()
    for field in np.unique(data["field"]):
        d = data[data["field"] == field]
        hs = d["h"].astype(float)
        for col, name in (("L2", "u"), ("L2_grad", "du/dx")):
            rate = estimate_rate(hs, d[col])
            lineplot(ax, hs, d[col], f"{field} {name} (rate {rate:.2f})")
    ax.set_xscale("log"); ax.set_yscale("log")
    ax.set_xlabel("element width h"); ax.set_ylabel("L2 error")
    ax.set_title("Interpolation convergence"); ax.legend(); fig.tight_layout()

    path = outdir / "err_vs_h.png"
    fig.savefig(path, dpi=200); plt.close(fig)
    return str(path)

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--csv", default="data/outputs/metrics.csv")
    ap.add_argument("--out", default="data/outputs")
    args = ap.parse_args(argv)
    path = plot_metrics(args.csv, args.out)
    print(f"[plot_metrics] saved {path}")

if __name__ == "__main__":
    main()
