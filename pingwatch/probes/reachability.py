"""
Background DNS reachability check.

A daemon thread resolves a well-known hostname on a fixed period and
publishes a single boolean. Readers get the latest value and never wait
on a lookup in flight.
"""

from __future__ import annotations
import socket
import threading
from typing import Any, Callable, Optional

from pingwatch.utils.log import get_logger

logger = get_logger(__name__)

Resolver = Callable[..., Any]


class ReachabilitySignal(threading.Thread):
    """
    Periodically resolves `host` and publishes whether it succeeded.

    The value is False until the first lookup completes.
    """
    def __init__(
        self,
        host: str = "google.com",
        interval: float = 1.0,
        resolver: Optional[Resolver] = None,
    ) -> None:
        super().__init__(name="reachability", daemon=True)
        self.host = host
        self.interval = interval
        self.resolver = resolver or socket.getaddrinfo
        self.lock = threading.Lock()
        self.stop_evt = threading.Event()
        self._value = False

    @property
    def value(self) -> bool:
        with self.lock:
            return self._value

    def _publish(self, value: bool) -> None:
        with self.lock:
            changed = value != self._value
            self._value = value
        if changed:
            logger.info("DNS lookup for %s is now %s", self.host, "ok" if value else "failing")

    def check_once(self) -> bool:
        """
        Resolve the host once and publish the outcome.

        Returns
        -------
        bool
            True only when the resolver returned at least one address.
        """
        try:
            addresses = self.resolver(self.host, None)
        except (OSError, UnicodeError) as e:
            logger.debug("DNS lookup for %s failed: %s", self.host, e)
            addresses = None
        except Exception:
            # anything else still reads as unreachable and keeps the thread alive
            logger.debug("DNS lookup for %s raised unexpectedly", self.host, exc_info=True)
            addresses = None
        ok = bool(addresses)
        self._publish(ok)
        return ok

    def run(self) -> None:
        self.check_once()
        while not self.stop_evt.wait(self.interval):
            self.check_once()

    def stop(self) -> None:
        """Ask the thread to stop after the lookup in flight, if any."""
        self.stop_evt.set()


class StaticSignal:
    """
    Fixed reachability value, for replays and tests.
    """
    def __init__(self, value: bool = True) -> None:
        self.value = value
