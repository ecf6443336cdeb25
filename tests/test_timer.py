from __future__ import annotations

import pytest

from tools.timer import TimerManager, TimerStats


def test_timer_stats_aggregates() -> None:
    stats = TimerStats()
    stats.add(1.0, ops=10)
    stats.add(3.0, ops=30)

    assert stats.count == 2
    assert stats.total == pytest.approx(4.0)
    assert stats.avg == pytest.approx(2.0)
    assert stats.min == pytest.approx(1.0)
    assert stats.max == pytest.approx(3.0)
    assert stats.ops_per_sec == pytest.approx(10.0)


def test_empty_timer_stats() -> None:
    stats = TimerStats()
    assert stats.total == 0.0
    assert stats.p95 == 0.0
    assert stats.ops_per_sec == 0.0


def test_timer_context_records_block() -> None:
    manager = TimerManager()
    with manager.timer("block", ops=5):
        pass

    assert manager.stats["block"].count == 1
    assert manager.stats["block"].ops == [5]


def test_timer_context_skips_failed_block() -> None:
    manager = TimerManager()
    with pytest.raises(RuntimeError):
        with manager.timer("boom"):
            raise RuntimeError("fail")

    assert "boom" not in manager.stats


def test_print_summary_writes_log(tmp_path, capsys) -> None:
    log_file = tmp_path / "logs" / "timers.log"
    manager = TimerManager(log_file=log_file)
    manager.add_time("enqueue", 0.5, ops=100)
    manager.print_summary(sort_by="ops")

    assert "enqueue" in capsys.readouterr().out
    assert "enqueue" in log_file.read_text(encoding="utf8")


def test_print_summary_rejects_unknown_sort_key() -> None:
    manager = TimerManager()
    manager.add_time("x", 0.1)
    with pytest.raises(ValueError):
        manager.print_summary(sort_by="median")
