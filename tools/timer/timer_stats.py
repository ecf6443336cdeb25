import numpy as np


class TimerStats:
    """
        Статистика по одному имени блока.
        Хранит длительности замеров и число операций в каждом из них,
        агрегаты считаются через numpy.
    """

    __slots__ = ("times", "ops")

    def __init__(self):
        self.times = []
        self.ops = []

    def add(self, elapsed: float, ops: int = 1) -> None:
        self.times.append(elapsed)
        self.ops.append(ops)

    @property
    def count(self) -> int:
        return len(self.times)

    @property
    def total(self) -> float:
        return float(np.sum(self.times)) if self.count else 0.0

    @property
    def avg(self) -> float:
        return float(np.mean(self.times)) if self.count else 0.0

    @property
    def min(self) -> float:
        return float(np.min(self.times)) if self.count else 0.0

    @property
    def max(self) -> float:
        return float(np.max(self.times)) if self.count else 0.0

    @property
    def p95(self) -> float:
        return float(np.percentile(self.times, 95)) if self.count else 0.0

    @property
    def ops_per_sec(self) -> float:
        """ Суммарное число операций, делённое на суммарное время. """
        total = self.total
        return float(np.sum(self.ops)) / total if total > 0 else 0.0
