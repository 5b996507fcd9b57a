"""Tests for the command line interface."""
from typer.testing import CliRunner

from montepi.cli import app
from montepi.utils.io import read_jsonl

runner = CliRunner()


class TestRun:
    def test_run_writes_history_and_trace(self, tmp_path):
        history = tmp_path / "history.jsonl"
        trace = tmp_path / "trace.jsonl"
        result = runner.invoke(
            app,
            [
                "run", "--points", "450", "--speed", "5", "--seed", "3",
                "--history", str(history), "--trace", str(trace),
            ],
        )
        assert result.exit_code == 0, result.output
        assert ">>> SIMULATION COMPLETE <<<" in result.output
        assert "points=450" in result.output
        assert len(read_jsonl(history)) == 450
        ticks = read_jsonl(trace)
        assert [t["batch"] for t in ticks] == [200, 200, 50]
        assert ticks[-1]["snapshot"]["complete"] is True

    def test_run_with_report(self, tmp_path):
        history = tmp_path / "history.jsonl"
        out = tmp_path / "report"
        result = runner.invoke(
            app,
            ["run", "--points", "100", "--speed", "4", "--history", str(history), "--report", str(out)],
        )
        assert result.exit_code == 0, result.output
        assert (out / "summary.md").exists()

    def test_max_ticks_leaves_run_unfinished(self):
        result = runner.invoke(app, ["run", "--points", "1000", "--speed", "1", "--max-ticks", "3"])
        assert result.exit_code == 0, result.output
        assert "SIMULATION COMPLETE" not in result.output
        assert "ticks=3" in result.output

    def test_report_without_history_fails_before_sampling(self, tmp_path):
        trace = tmp_path / "trace.jsonl"
        result = runner.invoke(
            app,
            ["run", "--points", "300", "--speed", "5", "--trace", str(trace), "--report", str(tmp_path / "rep")],
        )
        assert result.exit_code != 0
        assert not trace.exists()
        assert "SIMULATION COMPLETE" not in result.output

    def test_bad_speed(self):
        result = runner.invoke(app, ["run", "--speed", "9"])
        assert result.exit_code != 0

    def test_negative_points(self):
        result = runner.invoke(app, ["run", "--points", "-5"])
        assert result.exit_code != 0


class TestOtherCommands:
    def test_rates(self):
        result = runner.invoke(app, ["rates"])
        assert result.exit_code == 0
        assert "Very Fast" in result.output
        assert "200 samples/tick" in result.output

    def test_report(self, tmp_path):
        history = tmp_path / "history.jsonl"
        runner.invoke(app, ["run", "--points", "50", "--seed", "1", "--history", str(history)])
        out = tmp_path / "report"
        result = runner.invoke(app, ["report", str(history), "--out", str(out)])
        assert result.exit_code == 0, result.output
        assert "pi=" in result.output
        assert (out / "points.png").exists()
