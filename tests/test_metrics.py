import logging

import pytest
from wordhunt.metrics import SolveMetrics


def test_stage_records_elapsed_ms():
    metrics = SolveMetrics("cats")
    with metrics.stage("search"):
        pass
    assert set(metrics.timings) == {"search"}
    assert metrics.timings["search"] >= 0
    assert metrics.total_ms >= metrics.timings["search"]


def test_stage_recorded_when_body_raises():
    metrics = SolveMetrics()
    with pytest.raises(RuntimeError):
        with metrics.stage("board"):
            raise RuntimeError("bad board")
    assert "board" in metrics.timings


def test_record_words():
    metrics = SolveMetrics("catsdogxxxxxxxxx")
    metrics.record_words(["cats", "cat", "dog"])
    assert metrics.word_count == 3
    assert metrics.longest == "cats"
    assert metrics.by_length == {4: 1, 3: 2}
    assert list(metrics.by_length) == [4, 3]


def test_record_no_words():
    metrics = SolveMetrics("zzzz")
    metrics.record_words([])
    assert metrics.word_count == 0
    assert metrics.longest == ""
    assert metrics.by_length == {}


def test_summary():
    metrics = SolveMetrics("cat")
    with metrics.stage("search"):
        pass
    metrics.record_words(["cat"])
    summary = metrics.summary()
    assert summary["board"] == "cat"
    assert summary["word_count"] == 1
    assert summary["longest"] == "cat"
    assert summary["by_length"] == {3: 1}
    assert set(summary["stages"]) == {"search"}
    assert summary["total_ms"] >= 0


def test_log_line(caplog):
    metrics = SolveMetrics("cat")
    metrics.record_words(["cat"])
    with caplog.at_level(logging.INFO, logger="wordhunt"):
        metrics.log()
    assert "board=cat words=1 longest=cat" in caplog.text
