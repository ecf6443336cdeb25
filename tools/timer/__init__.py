from .timer_manager import TimerManager
from .timer_context import TimerContext
from .timer_stats import TimerStats

__all__ = ["TimerManager", "TimerContext", "TimerStats"]
