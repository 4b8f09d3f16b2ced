"""
Command-line interface for mesh interpolation runs.

Builds a uniform mesh, initializes its elements, evaluates a predefined field
at the nodes and samples the finite-element interpolant on a dense grid.
Results are saved as CSV files suitable for plotting and comparison.
"""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from fea1d.core import FIELDS, MeshConfig, get_field_config, interpolate_1d, l2_error


def run_mesh(field: str, elements: int, samples: int, outdir: str):
    """
    Interpolate a predefined field and save the sampled interpolant.

    Args:
        field: Field name (see ``fea1d.core.FIELDS``)
        elements: Number of mesh elements
        samples: Number of equally spaced sample points on [0, 1]
        outdir: Output directory for the CSV file

    Returns:
        tuple: (csv_path, L2 error against the exact field)

    CSV format:
        x, u_h (interpolant), u_exact
    """
    u_fn, _ = get_field_config(field)
    cfg = MeshConfig(N=elements, n_samples=samples)

    x, u_h = interpolate_1d(cfg, u_fn)
    u_exact = u_fn(x)
    l2 = l2_error(u_h, u_exact)

    out = Path(outdir); out.mkdir(parents=True, exist_ok=True)
    csv_path = out / f"mesh_{field}.csv"
    np.savetxt(csv_path, np.c_[x, u_h, u_exact], delimiter=",", header="x,u_h,u_exact", comments="")
    return str(csv_path), l2


def main(argv=None):
    """Command-line interface for a single interpolation run."""
    ap = argparse.ArgumentParser()
    ap.add_argument("--field", choices=list(FIELDS), default="sine")
    ap.add_argument("--elements", type=int, default=MeshConfig.N)
    ap.add_argument("--samples", type=int, default=MeshConfig.n_samples)
    ap.add_argument("--out", type=str, default="data/outputs")
    args = ap.parse_args(argv)

    print(f"[MESH] field={args.field} | elements={args.elements} | samples={args.samples}")

    csv_path, l2 = run_mesh(args.field, args.elements, args.samples, args.out)
    print(f"[MESH] L2 interpolation error = {l2:.3e}")
    print(f"Saved interpolant to {csv_path}")

if __name__ == "__main__":
    main()
