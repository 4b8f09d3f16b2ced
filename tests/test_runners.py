from pathlib import Path

import numpy as np
import pytest

from fea1d.experiments import estimate_rate, interp_errors, sweep
from fea1d.experiments import run_from_config
from fea1d.experiments.sweep_convergence import main as sweep_main
from fea1d.runners import run_mesh
from fea1d.runners.run_mesh import main as run_mesh_main
from fea1d.visualization import (animate_refinement, plot_interpolant, plot_metrics,
                                 plot_shape_functions)


def test_run_mesh_writes_csv(tmp_path):
    """Test that a single run writes x, u_h, u_exact columns."""
    csv_path, l2 = run_mesh("quadratic", elements=8, samples=65, outdir=str(tmp_path))
    assert Path(csv_path).name == "mesh_quadratic.csv"
    assert Path(csv_path).read_text().splitlines()[0] == "x,u_h,u_exact"

    data = np.loadtxt(csv_path, delimiter=",", skiprows=1)
    assert data.shape == (65, 3)
    assert np.allclose(data[:, 2], data[:, 0] ** 2)
    assert l2 > 0


def test_run_mesh_cli(tmp_path, capsys):
    run_mesh_main(["--field", "linear", "--elements", "4", "--samples", "17", "--out", str(tmp_path)])
    assert (tmp_path / "mesh_linear.csv").exists()
    assert "[MESH]" in capsys.readouterr().out


def test_linear_field_is_exact():
    L2, L2_grad = interp_errors("linear", 4, 129)
    assert L2 < 1e-12
    assert L2_grad < 1e-12


def test_convergence_rates():
    """Interpolant converges at second order, its slope at first order."""
    rows = sweep("quadratic", [4, 8, 16, 32], 1025)
    hs = [r[2] for r in rows]
    assert 1.8 < estimate_rate(hs, [r[3] for r in rows]) < 2.2
    assert 0.8 < estimate_rate(hs, [r[4] for r in rows]) < 1.2

    rows = sweep("sine", [8, 16, 32, 64], 1025)
    hs = [r[2] for r in rows]
    assert 1.7 < estimate_rate(hs, [r[3] for r in rows]) < 2.3


def test_estimate_rate_without_errors():
    assert np.isnan(estimate_rate([0.5, 0.25], [0.0, 0.0]))


def test_sweep_and_metrics_plot(tmp_path):
    sweep_main(["--field", "quadratic", "--N-list", "2", "4", "8", "--samples", "65",
                "--out", str(tmp_path)])
    csv = tmp_path / "metrics.csv"
    assert csv.read_text().splitlines()[0] == "field,N,h,L2,L2_grad"
    assert len(csv.read_text().splitlines()) == 4

    path = plot_metrics(str(csv), str(tmp_path))
    assert Path(path).exists()


def test_plots(tmp_path):
    csv_path, _ = run_mesh("sine", elements=4, samples=33, outdir=str(tmp_path))
    paths = plot_interpolant(csv_path, str(tmp_path), elements=4)
    assert all(Path(p).exists() for p in paths)
    paths = plot_interpolant(csv_path, str(tmp_path / "no_nodes"))
    assert all(Path(p).exists() for p in paths)
    assert Path(plot_shape_functions(str(tmp_path))).exists()


def test_animate_refinement(tmp_path):
    out = tmp_path / "refine.gif"
    animate_refinement("sine", [1, 2, 4], str(out), samples=33)
    assert out.exists()
    with pytest.raises(ValueError):
        animate_refinement("sine", [], str(out))


def test_build_commands(tmp_path):
    """Test that a YAML-style config maps to one command per stage."""
    cfg = {
        "mesh": {"field": "sine", "elements": 16, "samples": 129},
        "sweep": {"N_list": [4, 8], "samples": 257},
        "animate": {"enabled": True, "N_list": [1, 2]},
    }
    cmds = run_from_config.build_commands(cfg, tmp_path)
    assert list(cmds) == ["mesh", "sweep", "plot", "metrics", "animate"]
    assert cmds["mesh"][1:3] == ["-m", "fea1d.runners.run_mesh"]
    assert "--elements" in cmds["mesh"] and "16" in cmds["mesh"]
    i = cmds["sweep"].index("--N-list")
    assert cmds["sweep"][i + 1:i + 3] == ["4", "8"]
    assert str(tmp_path / "mesh_sine.csv") in cmds["plot"]

    cmds = run_from_config.build_commands({"mesh": {"field": "linear"}}, tmp_path)
    assert list(cmds) == ["mesh", "plot"]


def test_run_from_config_dry_run(tmp_path, capsys):
    cfg_path = tmp_path / "cfg.yaml"
    cfg_path.write_text(
        f"outdir: {tmp_path / 'out'}\n"
        "mesh:\n  field: quadratic\n  elements: 8\n"
        "sweep:\n  N_list: [2, 4]\n"
    )
    run_from_config.main(["--cfg", str(cfg_path), "--dry-run", "--skip", "metrics"])
    out = capsys.readouterr().out
    assert out.count("[run]") == 3
    assert "fea1d.visualization.plot_metrics" not in out
    assert (tmp_path / "out").is_dir()


def test_run_from_config_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        run_from_config.main(["--cfg", str(tmp_path / "missing.yaml")])
    assert exc.value.code == 1


if __name__ == "__main__":
    test_linear_field_is_exact()
    test_convergence_rates()
    print("✅ Runner tests passed.")
