"""Smoke tests for the command line tools."""

import pandas as pd
import pytest

import plots
import run_calc


def test_run_calc_scenario_prints_summary(capsys):
    run_calc.main(["--scenario", "example"])
    out = capsys.readouterr().out
    assert "Model: M/M/3" in out
    assert "p0 (idle prob)" in out


def test_run_calc_reports_instability(capsys):
    run_calc.main(["--lam", "5", "--mu", "3"])
    assert "Error: System unstable (ρ >= 1)" in capsys.readouterr().out


def test_run_calc_rejects_bad_form_values():
    with pytest.raises(SystemExit):
        run_calc.main(["--lam", "1", "--mu", "0"])
    with pytest.raises(SystemExit):
        run_calc.main(["--model", "mmc", "--lam", "1", "--mu", "2", "--c", "0"])
    with pytest.raises(SystemExit):
        run_calc.main(["--lam", "1"])


def test_run_calc_exports_csv(tmp_path):
    target = tmp_path / "result.csv"
    run_calc.main(["--lam", "2", "--mu", "5", "--csv", str(target)])
    assert target.exists()
    assert '"rho","0.4"' in target.read_text(encoding="utf-8")


def test_run_calc_csv_directory_gets_timestamped_name(tmp_path):
    run_calc.main(["--scenario", "light", "--csv", str(tmp_path)])
    files = list(tmp_path.glob("queue-results-*.csv"))
    assert len(files) == 1


def test_run_calc_simulation_comparison(capsys):
    run_calc.main(
        ["--lam", "0.5", "--mu", "1", "--replications", "2", "--warmup", "100", "--horizon", "2000"]
    )
    out = capsys.readouterr().out
    assert "Simulation vs. formulas:" in out
    assert "rho" in out


def test_run_calc_simulation_refused_when_unstable():
    with pytest.raises(SystemExit):
        run_calc.main(["--scenario", "overload", "--replications", "1"])


def test_plots_writes_chart_and_curve(tmp_path):
    png = tmp_path / "chart.png"
    curve = tmp_path / "curve.csv"
    plots.main(
        [
            "--metric", "Wq",
            "--model", "mmc",
            "--mu", "3",
            "--c", "3",
            "--lambda-max", "10",
            "--points", "25",
            "--out", str(png),
            "--csv", str(curve),
        ]
    )
    assert png.stat().st_size > 0
    df = pd.read_csv(curve)
    assert len(df) == 25
    assert df["Wq"].isna().any()
    assert df["Wq"].iloc[0] >= 0


def test_plots_rejects_bad_range():
    with pytest.raises(SystemExit):
        plots.main(["--mu", "3", "--lambda-max", "0"])
    with pytest.raises(SystemExit):
        plots.main(["--metric", "p0", "--mu", "3", "--lambda-max", "2", "--out", "unused.png"])
