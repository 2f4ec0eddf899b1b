# pingwatch/analysis/config.py

from dataclasses import dataclass

@dataclass
class MonitorConfig:
    """
    Thresholds and sizes for the ping monitor.

    Attributes
    ----------
    graph_max
        Maximum number of samples kept for the chart.
    graph_tick
        Offers dropped between two retained chart samples.
    max_graph_value
        Ceiling (ms) applied to chart samples.
    timeout_latency_min
        Latency (ms) above which a reply counts as offline and is shown as error.
    warning_latency_min
        Latency (ms) above which a reply is shown as warning.
    timeout_sentinel
        Value fed to the chart for a timeout; always above the ceiling.
    chart_height
        Rows of the rendered chart.
    chart_offset
        Columns between the axis labels and the plot.
    chart_padding
        Width of the axis labels.
    min_chart_points
        Samples needed before the chart is drawn.
    dns_host
        Hostname resolved by the reachability check.
    dns_interval
        Seconds between two reachability checks.
    """
    graph_max:           int     = 60
    graph_tick:          int     = 5
    max_graph_value:     float   = 300.0
    timeout_latency_min: float   = 101.0
    warning_latency_min: float   = 100.0
    timeout_sentinel:    float   = 10000.0
    chart_height:        int     = 10
    chart_offset:        int     = 2
    chart_padding:       int     = 8
    min_chart_points:    int     = 3
    dns_host:            str     = "google.com"
    dns_interval:        float   = 1.0

    @classmethod
    def default(cls):
        """Preset matching a standard `ping -i 1` session."""
        return cls()
