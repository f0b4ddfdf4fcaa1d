from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import urlparse


@dataclass
class RequestSpec:
    """A validated request, ready to be sent."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    timeout_seconds: Optional[int] = None

    @property
    def is_https(self) -> bool:
        return urlparse(self.url).scheme.lower() == "https"

    @property
    def is_head(self) -> bool:
        return self.method == "HEAD"


@dataclass
class Exchange:
    """What came back from one HTTP exchange."""
    status_code: int
    body: str
    elapsed_ms: float


@dataclass
class PhaseBreakdown:
    """Synthesized phase durations, all in milliseconds."""
    dns: float
    connect: float
    ssl: float
    processing: float
    transfer: float
    total: float
    response_size_bytes: int


@dataclass
class TimingReport:
    """A breakdown with every duration already rendered for display."""
    date: str
    dns: str
    connect: str
    ssl: str
    processing: str
    transfer: str
    total: str
    response_size_bytes: int
