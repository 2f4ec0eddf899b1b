# pingwatch/analysis/types.py

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from pingwatch.analysis.config import MonitorConfig


class LatencyLevel(str, Enum):
    """Display level of the most recent probe."""
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"

@dataclass
class SeriesBuffer:
    """
    Fixed-capacity, downsampled latency series used for the chart.

    Parameters
    ----------
    samples : deque[float]
        Retained samples, oldest first.
    ticks_until_next_sample : int
        Offers left to drop before the next one is retained.
    """
    samples: deque[float] = field(default_factory=deque)
    ticks_until_next_sample: int = 5

    @classmethod
    def empty(cls, cfg: MonitorConfig) -> SeriesBuffer:
        return cls(ticks_until_next_sample=cfg.graph_tick)

    def __len__(self) -> int:
        return len(self.samples)

@dataclass
class AggregatorState:
    """
    Running counters for one monitoring session.

    Parameters
    ----------
    latency_sum_ms : float
        Sum of all response latencies, for the exact running mean.
    response_count : int
        Number of responses folded in.
    timeout_count : int
        Number of timeouts folded in.
    offline_count : int
        Events classified offline (timeouts included).
    online_count : int
        Events classified online.
    series : SeriesBuffer
        Downsampled latency series fed on every event.
    """
    latency_sum_ms: float = 0.0
    response_count: int = 0
    timeout_count: int = 0
    offline_count: int = 0
    online_count: int = 0
    series: SeriesBuffer = field(default_factory=SeriesBuffer)

    @classmethod
    def fresh(cls, cfg: MonitorConfig) -> AggregatorState:
        """Empty state sized for the given config."""
        return cls(series=SeriesBuffer.empty(cfg))

    @property
    def event_count(self) -> int:
        return self.offline_count + self.online_count
