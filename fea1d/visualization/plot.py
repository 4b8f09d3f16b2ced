"""
Basic plotting utilities for mesh interpolation results.

Generates static plots of the sampled interpolant against the exact field,
the pointwise interpolation error, and the linear shape functions on the
reference element.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

import matplotlib
import numpy as np

matplotlib.use("Agg")  # headless-safe
import matplotlib.pyplot as plt

from fea1d.core import Mesh, l2_error


def plot_interpolant(csv_path: str, out: str, elements: Optional[int] = None):
    """
    Plot an interpolant CSV written by ``fea1d.runners.run_mesh``.

    Args:
        csv_path: CSV with columns x, u_h, u_exact
        out: Output directory for figures
        elements: If given, mark the mesh nodes of a mesh with this many elements

    Returns:
        list of saved figure paths
    """
    outdir = Path(out); outdir.mkdir(parents=True, exist_ok=True)
    stem = Path(csv_path).stem
    data = np.loadtxt(csv_path, delimiter=",", skiprows=1)
    x, u_h, u_exact = data[:, 0], data[:, 1], data[:, 2]
    l2 = l2_error(u_h, u_exact)

    # Interpolant vs exact
    fig, ax = plt.subplots()
    ax.plot(x, u_exact, label="exact")
    ax.plot(x, u_h, "--", label="FE interpolant")
    if elements:
        x_nodes = Mesh(elements).node_coordinates()
        ax.plot(x_nodes, np.interp(x_nodes, x, u_h), "o", ms=3, label="nodes")
    ax.set_xlabel("x"); ax.set_ylabel("u(x)")
    ax.set_title(f"Interpolant - {stem} (L2={l2:.3e})")
    ax.legend(); fig.tight_layout()
    disp_path = outdir / f"fig_{stem}_interp.png"
    fig.savefig(disp_path, dpi=200); plt.close(fig)

    # Error vs x
    fig, ax = plt.subplots()
    ax.plot(x, np.abs(u_h - u_exact))
    ax.set_xlabel("x"); ax.set_ylabel("|u_h - u|")
    ax.set_title(f"Pointwise error - {stem}")
    fig.tight_layout()
    err_path = outdir / f"fig_{stem}_err.png"
    fig.savefig(err_path, dpi=200); plt.close(fig)

    return [str(disp_path), str(err_path)]


def plot_shape_functions(out: str, n_points: int = 101):
    """Plot N0 and N1 over the reference element [-1, 1]."""
    outdir = Path(out); outdir.mkdir(parents=True, exist_ok=True)
    r = np.linspace(-1.0, 1.0, n_points)
    N = Mesh(1).shape_function_values(r)

    fig, ax = plt.subplots()
    ax.plot(r, N[0], label="N0 = (1 - r)/2")
    ax.plot(r, N[1], label="N1 = (1 + r)/2")
    ax.plot(r, N[0] + N[1], ":", color="gray", label="N0 + N1")
    ax.set_xlabel("reference coordinate r"); ax.set_ylabel("N(r)")
    ax.set_title("Linear shape functions")
    ax.legend(); fig.tight_layout()
    path = outdir / "fig_shape_functions.png"
    fig.savefig(path, dpi=200); plt.close(fig)
    return str(path)


def main(argv=None):
    """
    Generate interpolation plots.

    Creates the interpolant-vs-exact plot and the pointwise error plot for the
    given CSV, plus the reference shape functions when requested.
    """
    ap = argparse.ArgumentParser()
    ap.add_argument("--csv", type=str, default="data/outputs/mesh_sine.csv")
    ap.add_argument("--elements", type=int, default=None)
    ap.add_argument("--shapes", action="store_true", help="also plot the reference shape functions")
    ap.add_argument("--out", type=str, default="data/outputs")
    args = ap.parse_args(argv)

    paths = plot_interpolant(args.csv, args.out, args.elements)
    if args.shapes:
        paths.append(plot_shape_functions(args.out))

    print(f"[plot] Saved plots to {args.out}: {', '.join(Path(p).name for p in paths)}")


if __name__ == "__main__":
    main()
