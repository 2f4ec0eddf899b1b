import pytest

from pingwatch import monitor
from pingwatch.analysis.aggregator import Aggregator
from pingwatch.probes.reachability import StaticSignal

SESSION = """\
PING google.com (142.250.72.14): 56 data bytes
64 bytes from 142.250.72.14: icmp_seq=0 ttl=117 time=10.000 ms
64 bytes from 142.250.72.14: icmp_seq=1 ttl=117 time=20.000 ms
Request timeout for icmp_seq 2
64 bytes from 142.250.72.14: icmp_seq=3 ttl=117 time=30.000 ms

--- google.com ping statistics ---
4 packets transmitted, 3 packets received, 25.0% packet loss
"""


class _Recorder:
    def __init__(self) -> None:
        self.calls = []

    def __call__(self, snapshot, series) -> None:
        self.calls.append((snapshot, list(series)))


def test_session_is_folded_in_order() -> None:
    agg = Aggregator()
    sink = _Recorder()
    last = monitor.run(SESSION.splitlines(keepends=True), agg, StaticSignal(True), sink)

    assert len(sink.calls) == 4
    assert [s.last_latency_label for s, _ in sink.calls] == ["10", "20", "timeout", "30"]
    assert last == sink.calls[-1][0]
    assert last.average_latency_ms == pytest.approx(20.0)
    assert last.timeout_count == 1
    assert last.online_count == 3
    assert last.offline_count == 1
    assert last.online_percentage == pytest.approx(75.0)


def test_noise_changes_nothing() -> None:
    agg = Aggregator()
    sink = _Recorder()
    noise = ["", "PING x (1.2.3.4): 56 data bytes\n", "garbage\r\n", "Request timeout for icmp_seq \n"]
    assert monitor.run(noise, agg, StaticSignal(True), sink) is None
    assert sink.calls == []
    assert agg.state.event_count == 0
    assert agg.state.response_count == 0
    assert agg.state.series.ticks_until_next_sample == agg.cfg.graph_tick
    assert agg.series == []


def test_signal_is_read_per_event() -> None:
    class Flipping:
        def __init__(self) -> None:
            self.reads = 0

        @property
        def value(self) -> bool:
            self.reads += 1
            return self.reads % 2 == 1

    lines = [f"64 bytes from 1.1.1.1: icmp_seq={i} ttl=57 time=5 ms" for i in range(4)]
    sink = _Recorder()
    monitor.run(lines, Aggregator(), Flipping(), sink)
    assert [s.dns_reachable for s, _ in sink.calls] == [True, False, True, False]
    assert [s.online for s, _ in sink.calls] == [True, False, True, False]


def test_series_is_handed_to_sink() -> None:
    lines = [f"64 bytes from 1.1.1.1: icmp_seq={i} ttl=57 time={i}.5 ms" for i in range(18)]
    sink = _Recorder()
    monitor.run(lines, Aggregator(), StaticSignal(True), sink)
    assert sink.calls[-1][1] == [5.5, 11.5, 17.5]
