"""
Ping parser: turn lines of `ping` output into PingResponse / PingTimeout events.
"""

import re
from typing import Optional

from pingwatch.utils.log import get_logger
from pingwatch.utils.validate import Event, PingResponse, PingTimeout

logger = get_logger(__name__)

# captures are loose; a failed conversion rejects the line
RE_PING_RESPONSE = re.compile(
    r"([\d]*) bytes from ([\d.]*): icmp_seq=([\d]*) ttl=([\d]*) time=([\d.]*) ms",
    re.ASCII,
)
RE_TIMEOUT_RESPONSE = re.compile(r"Request timeout for icmp_seq ([\d]*)", re.ASCII)


def parse_response(line: str) -> Optional[PingResponse]:
    """
    Match the echo-reply grammar.

    Parameters
    ----------
    line : str
        One line of ping output.

    Returns
    -------
    Optional[PingResponse]
        The reply, or None if the line does not match or a capture is malformed.
    """
    m = RE_PING_RESPONSE.search(line)
    if m is None:
        return None
    size, ip, seq, ttl, time = m.groups()
    try:
        return PingResponse(
            latency_ms=float(time),
            sequence=int(seq),
            ttl=int(ttl),
            source_addr=ip,
            size_bytes=int(size),
        )
    except ValueError:
        logger.debug("Malformed reply line: %r", line)
        return None


def parse_timeout(line: str) -> Optional[PingTimeout]:
    """
    Match the request-timeout grammar.
    """
    m = RE_TIMEOUT_RESPONSE.search(line)
    if m is None:
        return None
    try:
        return PingTimeout(sequence=int(m.group(1)))
    except ValueError:
        logger.debug("Malformed timeout line: %r", line)
        return None


def classify(line: str) -> Optional[Event]:
    """
    Classify a ping output line, replies before timeouts.

    A line matching the reply grammar is never retried as a timeout, even
    when one of its captures fails to convert.
    """
    if RE_PING_RESPONSE.search(line):
        return parse_response(line)
    event = parse_timeout(line)
    if event is None:
        logger.debug("Skipping unrecognized line: %r", line)
    return event
