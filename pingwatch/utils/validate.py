"""
Pydantic schemas for classified ping events and the rendered snapshot.
"""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from pingwatch.analysis.types import LatencyLevel


class PingResponse(BaseModel):
    """
    One successful echo reply.
    """
    model_config = ConfigDict(frozen=True)

    latency_ms: float = Field(ge=0, allow_inf_nan=False)
    sequence: int = Field(ge=0)
    ttl: int = Field(ge=0)
    source_addr: str
    size_bytes: int = Field(default=0, ge=0)

class PingTimeout(BaseModel):
    """
    One echo request that got no reply.
    """
    model_config = ConfigDict(frozen=True)

    sequence: int = Field(ge=0)

Event = Union[PingResponse, PingTimeout]

class Snapshot(BaseModel):
    """
    Immutable view of the aggregate after one event.

    `average_latency_ms` is None until a response has been seen and
    `online_percentage` is None until any event has been seen.
    """
    model_config = ConfigDict(frozen=True)

    online: bool
    dns_reachable: bool
    last_latency_label: str
    latency_level: LatencyLevel
    average_latency_ms: Optional[float]
    timeout_count: int
    offline_count: int
    online_count: int
    online_percentage: Optional[float]
