"""Tests for JSONL persistence of runs and report rendering."""
import math

import pytest

from montepi.eval.report import generate_report, history_frame, summarize
from montepi.utils.io import read_jsonl, read_models, write_models
from montepi.utils.schema import SampleRecord, SamplerConfig


@pytest.fixture
def finished(make_sampler):
    sampler = make_sampler(target_count=300, rate_level=5, seed=11)
    while not sampler.complete:
        sampler.advance()
    return sampler


class TestJsonl:
    def test_history_written_in_order(self, finished, tmp_path):
        path = tmp_path / "nested" / "history.jsonl"
        write_models(path, finished.history)
        rows = read_jsonl(path)
        assert len(rows) == 300
        assert rows[0] == finished.history[0].model_dump()
        assert read_models(path, SampleRecord)[-1] == finished.history[-1]
        assert not list(path.parent.glob("*.tmp"))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.jsonl"
        write_models(path, [])
        assert path.read_text(encoding="utf-8") == ""
        assert read_jsonl(path) == []


class TestReport:
    def test_running_estimate(self):
        records = [
            SampleRecord(x=250, y=250, inside=True),
            SampleRecord(x=0, y=0, inside=False),
            SampleRecord(x=250, y=250, inside=True),
            SampleRecord(x=250, y=250, inside=True),
        ]
        df = history_frame(records)
        assert df["running_pi"].tolist() == [4.0, 2.0, pytest.approx(8 / 3), 3.0]
        assert summarize(df)["pi_estimate"] == 3.0

    def test_report_files(self, finished, tmp_path):
        history = tmp_path / "history.jsonl"
        write_models(history, finished.history)
        out = tmp_path / "report"
        summary = generate_report(history, out, config=SamplerConfig())

        snap = finished.statistics_snapshot()
        assert summary["generated_count"] == 300
        assert summary["inside_count"] == snap.inside_count
        assert summary["pi_estimate"] == pytest.approx(snap.pi_estimate)
        assert (out / "points.png").stat().st_size > 0
        assert (out / "convergence.png").stat().st_size > 0
        text = (out / "summary.md").read_text(encoding="utf-8")
        assert text.startswith("# Run Summary")
        assert f"{snap.pi_estimate:.6f}" in text

    def test_empty_history_writes_summary_only(self, tmp_path):
        history = tmp_path / "history.jsonl"
        write_models(history, [])
        out = tmp_path / "report"
        summary = generate_report(history, out)
        assert summary["pi_estimate"] == 0.0
        assert summary["absolute_error"] == math.pi
        assert (out / "summary.md").exists()
        assert not (out / "points.png").exists()
