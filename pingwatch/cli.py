#!/usr/bin/env python3
"""
CLI entry point for pingwatch.

Defines the following commands:
  ping HOST | pingwatch watch [--input FILE] [--dns-host HOST] [--dns-interval SEC] [--no-dns-check] [--no-clear]
  pingwatch version
"""

import io
import sys
from argparse import ArgumentParser, Namespace
from contextlib import nullcontext
from functools import partial
from importlib.metadata import PackageNotFoundError, version as _get_version
from typing import ContextManager, TextIO

from rich.console import Console

from pingwatch.utils.log import get_logger, set_level
from pingwatch.analysis.config import MonitorConfig
from pingwatch.analysis.aggregator import Aggregator
from pingwatch.probes.reachability import ReachabilitySignal, StaticSignal
from pingwatch import monitor, render

logger = get_logger(__name__)


def watch(
    input_path: str | None,
    dns_host: str,
    dns_interval: float,
    dns_check: bool,
    clear: bool,
) -> int:
    """
    Render a live summary of ping output.

    Parameters
    ----------
    input_path
        File to read ping output from; stdin when None.
    dns_host
        Hostname resolved by the background reachability check.
    dns_interval
        Seconds between reachability checks.
    dns_check
        When False, DNS is assumed reachable and no lookups are made.
    clear
        Clear the terminal before each redraw.

    Returns
    -------
    int
        Process exit status.
    """
    cfg = MonitorConfig(dns_host=dns_host, dns_interval=dns_interval)
    source = input_path or "<stdin>"
    logger.info("Watch: input=%s, dns_host=%s, dns_check=%s", source, dns_host, dns_check)

    try:
        stream = _open_input(input_path)
    except OSError as e:
        logger.error("Cannot open %s: %s", source, e)
        return 1

    if dns_check:
        signal = ReachabilitySignal(cfg.dns_host, cfg.dns_interval)
        signal.start()
    else:
        signal = StaticSignal(True)

    console = Console()
    sink = partial(render.show, console, cfg=cfg, clear=clear)
    try:
        with stream as lines:
            monitor.run(lines, Aggregator(cfg), signal, sink)
    except OSError as e:
        logger.error("I/O error while watching %s: %s", source, e)
        return 1
    except KeyboardInterrupt:
        return 130
    finally:
        if isinstance(signal, ReachabilitySignal):
            signal.stop()
    return 0


def _open_input(input_path: str | None) -> ContextManager[TextIO]:
    """
    Open the ping output source; undecodable bytes become U+FFFD either way.
    """
    if input_path is not None:
        return open(input_path, "r", encoding="utf-8", errors="replace")
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="replace")
    # stdin stays open for the interpreter
    return nullcontext(sys.stdin)


def version() -> None:
    """
    Print the installed pingwatch package version.
    """
    try:
        ver = _get_version("pingwatch")
    except PackageNotFoundError:
        ver = "unknown"
    print(f"pingwatch version {ver}")


def parse_args(argv: list[str] | None = None) -> Namespace:
    """
    Parse command-line arguments and return the populated namespace.
    """
    defaults = MonitorConfig.default()
    parser = ArgumentParser(prog="pingwatch")
    parser.add_argument(
        "--log-level", type=str, default="INFO", help="Log level for stderr output."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # pingwatch watch
    p = subparsers.add_parser("watch", help="Render a live summary of ping output.")
    p.add_argument(
        "--input", dest="input_path", type=str, help="Read ping output from FILE instead of stdin."
    )
    p.add_argument(
        "--dns-host", type=str, default=defaults.dns_host, help="Hostname for the DNS check."
    )
    p.add_argument(
        "--dns-interval", type=float, default=defaults.dns_interval, help="Seconds between DNS checks."
    )
    p.add_argument(
        "--no-dns-check", dest="dns_check", action="store_false",
        help="Assume DNS is reachable (useful when replaying saved output).",
    )
    p.add_argument(
        "--no-clear", dest="clear", action="store_false", help="Append redraws instead of clearing."
    )

    # pingwatch version
    subparsers.add_parser("version", help="Show pingwatch version and exit.")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """
    Entry point: dispatch to the selected subcommand.
    """
    args = parse_args(argv)
    set_level(args.log_level.upper())
    match args.command:
        case "watch":
            sys.exit(watch(args.input_path, args.dns_host, args.dns_interval, args.dns_check, args.clear))
        case "version":
            version()
        case _:
            sys.exit(1)


if __name__ == "__main__":
    main()
