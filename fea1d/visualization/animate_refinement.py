"""
Mesh refinement animation utilities.

Creates a GIF showing the finite-element interpolant of a field converging to
the exact field as the mesh is refined.
"""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib
import numpy as np

matplotlib.use("Agg")  # headless-safe
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter

from fea1d.core import FIELDS, Mesh, get_field_config


def animate_refinement(field: str, N_list, outgif: str, samples: int = 513):
    """
    Create animated visualization of the interpolant under refinement.

    Args:
        field: Field name (see ``fea1d.core.FIELDS``)
        N_list: Element counts, one frame each
        outgif: Output path for the generated GIF animation
        samples: Number of sample points per frame
    """
    if len(N_list) == 0:
        raise ValueError("N_list must contain at least one element count")
    P = Path(outgif).parent; P.mkdir(parents=True, exist_ok=True)

    u_fn, _ = get_field_config(field)
    x = np.linspace(0.0, 1.0, samples)
    u_exact = u_fn(x)

    frames = []
    for N in N_list:
        mesh = Mesh(N)
        elements = mesh.initialize_elements()
        x_nodes = mesh.node_coordinates()
        d = u_fn(x_nodes)
        frames.append((N, x_nodes, d, mesh.approx_values(x, d, elements)))

    pad = 0.1 * max(np.ptp(u_exact), 1e-12)
    fig, ax = plt.subplots()
    ax.plot(x, u_exact, lw=2, label="exact")
    lh, = ax.plot([], [], lw=2, ls="--", label="FE interpolant")
    ln, = ax.plot([], [], "o", ms=3, label="nodes")
    ax.set_xlim(0, 1); ax.set_ylim(u_exact.min() - pad, u_exact.max() + pad)
    ax.set_xlabel("x"); ax.set_ylabel("u(x)"); ax.legend()

    def update(i):
        N, x_nodes, d, u_h = frames[i]
        lh.set_data(x, u_h)
        ln.set_data(x_nodes, d)
        ax.set_title(f"{field} | N = {N} elements")
        return lh, ln

    ani = FuncAnimation(fig, update, frames=len(frames), blit=False, interval=400)
    ani.save(outgif, writer=PillowWriter(fps=2))
    plt.close(fig)
    print(f"[animate_refinement] saved {outgif}")

def main(argv=None):
    """Command-line interface for refinement animation generation."""
    ap = argparse.ArgumentParser()
    ap.add_argument("--field", choices=list(FIELDS), default="sine")
    ap.add_argument("--N-list", type=int, nargs="+", default=[1, 2, 4, 8, 16, 32])
    ap.add_argument("--out", default="data/outputs/refine.gif")
    args = ap.parse_args(argv)
    animate_refinement(args.field, args.N_list, args.out)

if __name__ == "__main__":
    main()
