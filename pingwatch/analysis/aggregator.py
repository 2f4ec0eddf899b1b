"""
Fold classified ping events into running connectivity statistics.

Each event updates an AggregatorState in place and produces a fresh,
immutable Snapshot:
- responses feed the running mean, the latency level and the online gate
- timeouts count as offline and push an off-scale spike to the chart
- every event is counted exactly once as either online or offline
"""

from __future__ import annotations
from typing import Optional

from pingwatch.analysis.config import MonitorConfig
from pingwatch.analysis.series import offer
from pingwatch.analysis.types import AggregatorState, LatencyLevel
from pingwatch.utils.log import get_logger
from pingwatch.utils.validate import Event, PingResponse, PingTimeout, Snapshot

logger = get_logger(__name__)

TIMEOUT_LABEL = "timeout"


def format_latency(latency_ms: float) -> str:
    """
    Print a latency the way ping does: `15` for whole values, `14.2` otherwise.
    """
    if latency_ms.is_integer():
        return str(int(latency_ms))
    return repr(latency_ms)


def latency_level(latency_ms: float, cfg: MonitorConfig) -> LatencyLevel:
    if latency_ms > cfg.timeout_latency_min:
        return LatencyLevel.ERROR
    if latency_ms > cfg.warning_latency_min:
        return LatencyLevel.WARNING
    return LatencyLevel.OK


def average_latency(state: AggregatorState) -> Optional[float]:
    if state.response_count == 0:
        return None
    return state.latency_sum_ms / state.response_count


def online_percentage(state: AggregatorState) -> Optional[float]:
    total = state.online_count + state.offline_count
    if total == 0:
        return None
    return state.online_count / total * 100


def update(
    state: AggregatorState,
    event: Event,
    dns_reachable: bool,
    cfg: Optional[MonitorConfig] = None,
) -> tuple[AggregatorState, Snapshot]:
    """
    Fold one event into the state.

    Parameters
    ----------
    state
        Session state, mutated in place.
    event
        A classified PingResponse or PingTimeout.
    dns_reachable
        Latest value of the reachability signal.
    cfg
        Monitor configuration; defaults to MonitorConfig.default().

    Returns
    -------
    tuple[AggregatorState, Snapshot]
        The updated state and the snapshot describing it.
    """
    cfg = cfg or MonitorConfig.default()

    if isinstance(event, PingResponse):
        latency = event.latency_ms
        state.response_count += 1
        state.latency_sum_ms += latency
        offer(state.series, latency, cfg)

        level = latency_level(latency, cfg)
        # DNS failures override a good ping; mobile links often answer ICMP without resolving
        online = latency <= cfg.timeout_latency_min and dns_reachable
        if online:
            state.online_count += 1
        else:
            state.offline_count += 1
        label = format_latency(latency)
    elif isinstance(event, PingTimeout):
        state.timeout_count += 1
        state.offline_count += 1
        offer(state.series, cfg.timeout_sentinel, cfg)

        level = LatencyLevel.ERROR
        online = False
        label = TIMEOUT_LABEL
    else:
        raise TypeError(f"Unsupported event type: {type(event).__name__}")

    snapshot = Snapshot(
        online=online,
        dns_reachable=dns_reachable,
        last_latency_label=label,
        latency_level=level,
        average_latency_ms=average_latency(state),
        timeout_count=state.timeout_count,
        offline_count=state.offline_count,
        online_count=state.online_count,
        online_percentage=online_percentage(state),
    )
    return state, snapshot


class Aggregator:
    """
    Owner of one session's state; the only writer to it.
    """
    def __init__(self, cfg: Optional[MonitorConfig] = None) -> None:
        self.cfg = cfg or MonitorConfig.default()
        self.state = AggregatorState.fresh(self.cfg)

    @property
    def series(self) -> list[float]:
        return list(self.state.series.samples)

    def update(self, event: Event, dns_reachable: bool) -> Snapshot:
        _, snapshot = update(self.state, event, dns_reachable, self.cfg)
        logger.debug(
            "Folded %s: online=%s level=%s",
            type(event).__name__, snapshot.online, snapshot.latency_level.value,
        )
        return snapshot
