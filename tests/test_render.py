from rich.console import Console

from pingwatch.analysis.config import MonitorConfig
from pingwatch.analysis.types import LatencyLevel
from pingwatch.render import render_snapshot, show, to_precision
from pingwatch.utils.validate import Snapshot


def _snapshot(**overrides) -> Snapshot:
    fields = dict(
        online=True,
        dns_reachable=True,
        last_latency_label="14.2",
        latency_level=LatencyLevel.OK,
        average_latency_ms=20.0,
        timeout_count=1,
        offline_count=1,
        online_count=3,
        online_percentage=75.0,
    )
    fields.update(overrides)
    return Snapshot(**fields)


def _text(snapshot: Snapshot, series: list[float]) -> str:
    console = Console(width=120, color_system=None, record=True)
    console.print(render_snapshot(snapshot, series))
    return console.export_text()


def test_to_precision_keeps_trailing_zeros() -> None:
    assert to_precision(20.0, 5) == "20.000"
    assert to_precision(75.0, 4) == "75.00"
    assert to_precision(100.0, 4) == "100.0"
    assert to_precision(14.21337, 5) == "14.213"
    assert to_precision(None, 5) == "n/a"


def test_summary_block() -> None:
    text = _text(_snapshot(), [])
    assert "CURRENT STATE" in text
    assert "Online" in text
    assert "DNS: true" in text
    assert "Latency: 14.2" in text
    assert "TRIP SUMMARY" in text
    assert "Average latency: 20.000ms" in text
    assert "Timeouts: 1" in text
    assert "Offline: 1s" in text
    assert "Online: 3s" in text
    assert "Online Percentage: 75.00%" in text


def test_offline_state() -> None:
    text = _text(
        _snapshot(online=False, dns_reachable=False, last_latency_label="timeout",
                  latency_level=LatencyLevel.ERROR),
        [],
    )
    assert "Offline" in text
    assert "DNS: false" in text
    assert "Latency: timeout" in text


def test_missing_statistics_render_as_no_data() -> None:
    text = _text(_snapshot(average_latency_ms=None, online_percentage=None), [])
    assert "Average latency: n/a" in text
    assert "Online Percentage: n/a" in text
    assert "nan" not in text.lower()


def test_chart_needs_three_points() -> None:
    without = _text(_snapshot(), [10.0, 20.0])
    with_chart = _text(_snapshot(), [10.0, 20.0, 300.0])
    assert len(with_chart.splitlines()) >= len(without.splitlines()) + MonitorConfig.default().chart_height
    assert "300.00" in with_chart


def test_show_appends_without_clear() -> None:
    console = Console(width=120, color_system=None, record=True)
    show(console, _snapshot(), [], clear=False)
    show(console, _snapshot(online_count=4), [], clear=False)
    text = console.export_text()
    assert text.count("CURRENT STATE") == 2
    assert "Online: 4s" in text
