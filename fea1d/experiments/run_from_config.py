"""
Configuration-driven experiment pipeline orchestrator.

Executes mesh interpolation experiments from YAML configuration files,
coordinating a single interpolation run, the refinement sweep and figure
generation in a reproducible and automated workflow.
"""

from __future__ import annotations

import argparse
import shlex
import subprocess
import sys
from pathlib import Path

import yaml

STAGES = ["mesh", "sweep", "plot", "metrics", "animate"]


def run(cmd_list, dry=False):
    """
    Execute a command with optional dry-run mode.

    Args:
        cmd_list: List of command arguments to execute
        dry: If True, only print the command without executing

    Returns:
        Return code from subprocess execution (0 for dry runs)
    """
    cmd_str = " ".join(shlex.quote(str(x)) for x in cmd_list)
    print(f"[run] {cmd_str}")
    if dry:
        return 0
    return subprocess.run(cmd_list, check=True).returncode

def add_if(d: dict, key: str, flag: str, target: list):
    """
    Conditionally add command-line flag and value to target list.

    Args:
        d: Dictionary to check for key presence
        key: Key to look for in dictionary
        flag: Command-line flag to add (e.g., "--samples")
        target: Target list to append flag and value to
    """
    if key in d and d[key] is not None:
        target += [flag, str(d[key])]

def build_commands(cfg: dict, outdir: Path) -> dict:
    """
    Translate a parsed YAML config into one command per enabled stage.

    Configuration Structure:
        mesh: single run (field, elements, samples)
        sweep: refinement sweep (N_list, samples); field taken from mesh
        plot: interpolant figure (enabled)
        metrics: convergence figure (enabled, needs sweep)
        animate: refinement GIF (enabled, N_list)

    Returns:
        Mapping of stage name to argument list, in execution order
    """
    py = sys.executable or "python"
    cmds = {}

    # ---- Mesh ----
    mesh = cfg.get("mesh", {})
    field = str(mesh.get("field", "sine"))
    mesh_cmd = [py, "-m", "fea1d.runners.run_mesh", "--field", field, "--out", str(outdir)]
    add_if(mesh, "elements", "--elements", mesh_cmd)
    add_if(mesh, "samples", "--samples", mesh_cmd)
    cmds["mesh"] = mesh_cmd

    # ---- Sweep ----
    sweep = cfg.get("sweep", None)
    if sweep:
        sweep_cmd = [py, "-m", "fea1d.experiments.sweep_convergence",
                     "--field", field, "--out", str(outdir)]
        if sweep.get("N_list"):
            sweep_cmd += ["--N-list"] + [str(n) for n in sweep["N_list"]]
        add_if(sweep, "samples", "--samples", sweep_cmd)
        cmds["sweep"] = sweep_cmd

    # ---- Figures ----
    plot = cfg.get("plot", {"enabled": True})
    if plot.get("enabled", True):
        plot_cmd = [py, "-m", "fea1d.visualization.plot",
                    "--csv", str(outdir / f"mesh_{field}.csv"),
                    "--out", str(outdir)]
        add_if(mesh, "elements", "--elements", plot_cmd)
        cmds["plot"] = plot_cmd

    metrics = cfg.get("metrics", {"enabled": True})
    if metrics.get("enabled", True):
        if "sweep" not in cmds:
            print("[warn] metrics present but sweep missing; skipping metrics stage.")
        else:
            cmds["metrics"] = [py, "-m", "fea1d.visualization.plot_metrics",
                               "--csv", str(outdir / "metrics.csv"),
                               "--out", str(outdir)]

    animate = cfg.get("animate", {"enabled": False})
    if animate.get("enabled", False):
        anim_cmd = [py, "-m", "fea1d.visualization.animate_refinement",
                    "--field", field,
                    "--out", str(outdir / f"refine_{field}.gif")]
        if animate.get("N_list"):
            anim_cmd += ["--N-list"] + [str(n) for n in animate["N_list"]]
        cmds["animate"] = anim_cmd

    return cmds

def main(argv=None):
    """
    Main orchestration function for configuration-driven experiments.

    Parses a YAML configuration file and runs, in order, the single
    interpolation run, the refinement sweep and the figure stages. Supports
    stage selection and dry-run mode.
    """
    ap = argparse.ArgumentParser(description="Run a mesh interpolation pipeline from a YAML config.")
    ap.add_argument("--cfg", required=True, help="YAML config file")
    ap.add_argument("--dry-run", action="store_true", help="Print commands without executing.")
    ap.add_argument("--only", nargs="*", choices=STAGES,
                    help="Run only these stages (default: all).")
    ap.add_argument("--skip", nargs="*", choices=STAGES,
                    help="Skip these stages.")
    args = ap.parse_args(argv)

    cfg_path = Path(args.cfg).resolve()
    if not cfg_path.exists():
        print(f"[error] config not found: {cfg_path}", file=sys.stderr)
        sys.exit(1)

    cfg = yaml.safe_load(cfg_path.read_text()) or {}
    outdir = Path(cfg.get("outdir", "data/outputs/example")).resolve()
    outdir.mkdir(parents=True, exist_ok=True)

    cmds = build_commands(cfg, outdir)

    # -------- Orchestration switches --------
    def wanted(stage):
        if args.only and stage not in args.only: return False
        if args.skip and stage in args.skip: return False
        return True

    # -------- Execute --------
    for stage in STAGES:
        if stage in cmds and wanted(stage):
            run(cmds[stage], args.dry_run)

if __name__ == "__main__":
    main()
