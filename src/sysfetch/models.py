"""Data models for sysfetch."""

from dataclasses import dataclass

FALLBACK = "unknown"


@dataclass(slots=True, frozen=True)
class HostSnapshot:
    """Immutable snapshot of the host facts shown by sysfetch."""

    user: str
    hostname: str
    os: str
    kernel: str
    uptime: str  # e.g. '1h 1m'
    shell: str
    cpu: str
    cpu_cores: str
    cpu_speed: str  # e.g. '2.40GHz'
    memory: str  # e.g. '7.6GB / 15.3GB'
