import time


class TimerContext:
    """
        Контекстный менеджер замера блока.
        ops — сколько операций выполняет блок (для расчёта ops/sec).
        Замер записывается только при успешном выходе из блока.
    """

    def __init__(self, name: str, manager, ops: int = 1):
        self.name = name
        self.manager = manager
        self.ops = ops
        self.t0 = 0.0

    def __enter__(self):
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.manager.add_time(self.name, time.perf_counter() - self.t0, self.ops)
        return False
