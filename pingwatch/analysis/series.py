"""
Downsampled latency series for the live chart.
"""

from typing import Optional

from pingwatch.analysis.config import MonitorConfig
from pingwatch.analysis.types import SeriesBuffer


def offer(buffer: SeriesBuffer, raw_latency_ms: float, cfg: Optional[MonitorConfig] = None) -> SeriesBuffer:
    """
    Offer one latency observation to the series.

    Only one offer in every ``cfg.graph_tick + 1`` is kept. A kept sample is
    clamped to ``cfg.max_graph_value`` and the oldest sample is evicted once
    the buffer holds more than ``cfg.graph_max`` entries.

    Parameters
    ----------
    buffer
        Series to update in place.
    raw_latency_ms
        Latency in ms, or the timeout sentinel.
    cfg
        Monitor configuration; defaults to MonitorConfig.default().

    Returns
    -------
    SeriesBuffer
        The same buffer, for chaining.
    """
    cfg = cfg or MonitorConfig.default()

    if buffer.ticks_until_next_sample > 0:
        buffer.ticks_until_next_sample -= 1
        return buffer

    buffer.samples.append(min(raw_latency_ms, cfg.max_graph_value))
    while len(buffer) > cfg.graph_max:
        buffer.samples.popleft()
    buffer.ticks_until_next_sample = cfg.graph_tick
    return buffer
