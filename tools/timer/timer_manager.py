import warnings
from pathlib import Path
from typing import Optional, Dict

from .timer_stats import TimerStats
from .timer_context import TimerContext


class TimerManager:
    """
        Собирает замеры по именам блоков и выводит сводную таблицу.
    """

    _SORT_KEYS = {
        "total": lambda item: item[1].total,
        "avg": lambda item: item[1].avg,
        "max": lambda item: item[1].max,
        "ops": lambda item: item[1].ops_per_sec,
    }

    def __init__(self, log_file: Optional[str | Path] = None):
        self.stats: Dict[str, TimerStats] = {}
        self.log_file = Path(log_file) if log_file else None

    def timer(self, name: str, ops: int = 1) -> TimerContext:
        """Возвращает контекст для замера блока из ops операций."""
        return TimerContext(name, self, ops)

    def add_time(self, name: str, elapsed: float, ops: int = 1) -> None:
        self.stats.setdefault(name, TimerStats()).add(elapsed, ops)

    def print_summary(self, sort_by: str = "total") -> None:
        """
            Выводит сводную таблицу.

            sort_by:
                "total" — по суммарному времени
                "avg"   — по среднему
                "max"   — по максимуму
                "ops"   — по пропускной способности
        """
        if not self.stats:
            print("[TimerManager] No stats collected.")
            return

        key_fn = self._SORT_KEYS.get(sort_by)
        if key_fn is None:
            raise ValueError(f"Unknown sort key '{sort_by}'. Available: {', '.join(self._SORT_KEYS)}")

        print("\n" + "=" * 90)
        print("TIMER SUMMARY")
        print("=" * 90)

        for name, stat in sorted(self.stats.items(), key=key_fn, reverse=True):
            print(self._format_row(name, stat))

        if self.log_file:
            self._save_to_log()

    def _save_to_log(self) -> None:
        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with self.log_file.open("a", encoding="utf8") as f:
                f.write(self.as_text())
        except OSError as e:
            warnings.warn(f"TimerManager: failed to write log {self.log_file}: {e}")

    def as_text(self) -> str:
        lines = ["TIMER SUMMARY"]
        lines.extend(self._format_row(name, stat) for name, stat in self.stats.items())
        return "\n".join(lines) + "\n"

    @staticmethod
    def _format_row(name: str, stat: TimerStats) -> str:
        return (
            f"{name:28s} | "
            f"count: {stat.count:5d} | "
            f"total: {stat.total:10.6f} | "
            f"avg: {stat.avg:10.6f} | "
            f"p95: {stat.p95:10.6f} | "
            f"ops/s: {stat.ops_per_sec:12.1f}"
        )
