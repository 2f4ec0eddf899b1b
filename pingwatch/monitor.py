"""
Line-by-line monitor loop: classify, fold, hand off for display.
"""

from typing import Callable, Iterable, Optional, Protocol, Sequence

from pingwatch.analysis.aggregator import Aggregator
from pingwatch.parsers.ping import classify
from pingwatch.utils.log import get_logger
from pingwatch.utils.validate import Snapshot

logger = get_logger(__name__)


class Signal(Protocol):
    @property
    def value(self) -> bool: ...


SnapshotSink = Callable[[Snapshot, Sequence[float]], None]


def run(
    lines: Iterable[str],
    aggregator: Aggregator,
    signal: Signal,
    on_snapshot: SnapshotSink,
) -> Optional[Snapshot]:
    """
    Consume `lines` in order until they run out.

    Each recognized line is folded into `aggregator` with the current
    reachability value before the next line is read; unrecognized lines
    change nothing and produce no output.

    Returns
    -------
    Optional[Snapshot]
        The last snapshot produced, or None if no line was recognized.
    """
    last: Optional[Snapshot] = None
    n_lines = 0
    for raw in lines:
        n_lines += 1
        event = classify(raw.rstrip("\r\n"))
        if event is None:
            continue
        last = aggregator.update(event, signal.value)
        on_snapshot(last, aggregator.series)
    logger.info("Input ended after %d lines, %d events", n_lines, aggregator.state.event_count)
    return last
