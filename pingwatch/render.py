"""
Terminal presenter: render a Snapshot and the latency series with Rich.
"""

from typing import Optional, Sequence

import asciichartpy
from rich.console import Console, Group
from rich.text import Text

from pingwatch.analysis.config import MonitorConfig
from pingwatch.analysis.types import LatencyLevel
from pingwatch.utils.validate import Snapshot

ERROR_HIGHLIGHT = "white on red"
SUCCESS_HIGHLIGHT = "white on green"
ERROR_NORMAL = "red"
SUCCESS_NORMAL = "green"
WARNING_NORMAL = "yellow"
HEADER = "underline bold"

NO_DATA = "n/a"

LEVEL_STYLES = {
    LatencyLevel.OK: SUCCESS_NORMAL,
    LatencyLevel.WARNING: WARNING_NORMAL,
    LatencyLevel.ERROR: ERROR_NORMAL,
}


def to_precision(value: Optional[float], digits: int) -> str:
    """
    Format to `digits` significant digits, keeping trailing zeros (75 -> 75.00).
    """
    if value is None:
        return NO_DATA
    return format(value, f"#.{digits}g")


def render_chart(series: Sequence[float], cfg: MonitorConfig) -> str:
    return asciichartpy.plot(
        list(series),
        {
            "height": cfg.chart_height,
            "offset": cfg.chart_offset,
            "format": f"{{:{cfg.chart_padding}.2f}} ",
        },
    )


def render_snapshot(
    snapshot: Snapshot,
    series: Sequence[float],
    cfg: Optional[MonitorConfig] = None,
) -> Group:
    """
    Build the renderable for one snapshot.

    Parameters
    ----------
    snapshot
        State to display.
    series
        Downsampled latency samples; charted once there are enough of them.
    cfg
        Monitor configuration; defaults to MonitorConfig.default().

    Returns
    -------
    Group
        Rich renderable with the state block, the summary and the chart.
    """
    cfg = cfg or MonitorConfig.default()

    parts = [Text("CURRENT STATE", style=HEADER)]
    if snapshot.online:
        parts.append(Text("Online", style=SUCCESS_HIGHLIGHT))
    else:
        parts.append(Text("Offline", style=ERROR_HIGHLIGHT))
    if snapshot.dns_reachable:
        parts.append(Text("DNS: true", style=SUCCESS_NORMAL))
    else:
        parts.append(Text("DNS: false", style=ERROR_NORMAL))
    parts.append(Text(f"Latency: {snapshot.last_latency_label}", style=LEVEL_STYLES[snapshot.latency_level]))

    average = to_precision(snapshot.average_latency_ms, 5)
    percentage = to_precision(snapshot.online_percentage, 4)
    parts.extend([
        Text(),
        Text("TRIP SUMMARY", style=HEADER),
        Text(f"Average latency: {average}" + ("ms" if snapshot.average_latency_ms is not None else "")),
        Text(f"Timeouts: {snapshot.timeout_count}"),
        Text(f"Offline: {snapshot.offline_count}s"),
        Text(f"Online: {snapshot.online_count}s"),
        Text(f"Online Percentage: {percentage}" + ("%" if snapshot.online_percentage is not None else "")),
        Text(),
    ])

    if len(series) >= cfg.min_chart_points:
        parts.append(Text(render_chart(series, cfg)))

    return Group(*parts)


def show(
    console: Console,
    snapshot: Snapshot,
    series: Sequence[float],
    cfg: Optional[MonitorConfig] = None,
    clear: bool = True,
) -> None:
    """
    Redraw the whole display for one snapshot.
    """
    if clear:
        console.clear()
    console.print(render_snapshot(snapshot, series, cfg))
