"""Host fact collection for sysfetch.

Every fact is gathered independently: a source is read, an extractor turns
the raw text into a display string, and any failure along the way is
replaced by that fact's fallback value.
"""

import logging
import math
import platform
from collections.abc import Callable

from sysfetch.models import FALLBACK, HostSnapshot
from sysfetch.sources import HostSources, default_sources

logger = logging.getLogger(__name__)

CPU_NAME_MAX = 30
CPU_NAME_KEEP = 27
KIB_PER_GIB = 1024**2

# Failures that mean "data source unavailable or malformed".
# UnicodeDecodeError is a ValueError.
SOURCE_ERRORS = (OSError, ValueError, KeyError, IndexError)


def probe(
    read: Callable[[], str],
    extract: Callable[[str], str],
    default: str = FALLBACK,
    fact: str = "fact",
) -> str:
    """
    Read a source and extract a display string, or return the default.

    Args:
        read: Zero-argument callable returning the raw source text.
        extract: Callable mapping the raw text to the display string.
        default: Value used when reading or extracting fails, or the result
            is empty.
        fact: Name used in log messages.
    """
    try:
        value = extract(read())
    except SOURCE_ERRORS as e:
        logger.debug("Falling back for %s: %s: %s", fact, type(e).__name__, e)
        return default

    if not value:
        logger.debug("Falling back for %s: empty value", fact)
        return default
    return value


# Extractors: raw source text -> display string.


def parse_uptime(text: str) -> str:
    """Format the first field of an uptime source as 'Xh Ym'."""
    seconds = float(text.split()[0])
    if not math.isfinite(seconds):
        raise ValueError(f"uptime is not finite: {seconds}")
    seconds = max(seconds, 0.0)
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    return f"{hours}h {minutes}m"


def parse_pretty_name(text: str) -> str:
    """Get the PRETTY_NAME value from os-release text."""
    for line in text.splitlines():
        if line.startswith("PRETTY_NAME="):
            return line[len("PRETTY_NAME=") :].strip('"')
    raise KeyError("PRETTY_NAME")


def parse_cpu_model(text: str) -> str:
    """Get the first CPU model name, truncated for display."""
    for line in text.splitlines():
        if not line.startswith("model name"):
            continue
        _, sep, name = line.partition(":")
        if not sep:
            continue
        name = name.strip()
        if len(name) > CPU_NAME_MAX:
            return f"{name[:CPU_NAME_KEEP]}..."
        return name
    raise KeyError("model name")


def count_processors(text: str) -> str:
    """Count the 'processor' entries in cpuinfo text."""
    cores = sum(1 for line in text.splitlines() if line.startswith("processor"))
    return str(cores)


def parse_cpu_speed(text: str) -> str:
    """Get the first 'cpu MHz' value formatted in GHz."""
    for line in text.splitlines():
        if not line.startswith("cpu MHz"):
            continue
        _, sep, speed = line.partition(":")
        if not sep:
            continue
        try:
            mhz = float(speed.strip())
        except ValueError:
            mhz = 0.0
        if not math.isfinite(mhz):
            mhz = 0.0
        return f"{mhz / 1000:.2f}GHz"
    raise KeyError("cpu MHz")


def parse_meminfo(text: str) -> dict[str, int]:
    """
    Parse 'Key:   value kB' lines into a mapping of key to integer.

    Values that are missing or not a non-negative integer become 0.
    """
    meminfo: dict[str, int] = {}
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if not sep:
            continue
        tokens = value.split()
        try:
            number = int(tokens[0])
        except (IndexError, ValueError):
            number = 0
        meminfo[key.strip()] = max(number, 0)
    return meminfo


def format_memory(meminfo: dict[str, int]) -> str:
    """Format used and total memory (kB values) as 'U.UGB / T.TGB'."""
    total = meminfo["MemTotal"]
    available = meminfo["MemAvailable"]
    used = max(total - available, 0)
    return f"{used / KIB_PER_GIB:.1f}GB / {total / KIB_PER_GIB:.1f}GB"


def platform_description() -> str:
    """Get the '{platform} {architecture}' string used when the OS is unknown."""
    system = platform.system().lower() or FALLBACK
    machine = platform.machine() or FALLBACK
    return f"{system} {machine}"


# Collectors: one per fact.


def _env_reader(sources: HostSources, name: str) -> Callable[[], str]:
    def read() -> str:
        value = sources.getenv(name)
        if value is None:
            raise KeyError(name)
        return value

    return read


def _source_reader(sources: HostSources, name: str) -> Callable[[], str]:
    return lambda: sources.read(name)


def _verbatim(text: str) -> str:
    return text


def _resolve(sources: HostSources | None) -> HostSources:
    return default_sources() if sources is None else sources


def get_user(sources: HostSources | None = None) -> str:
    """Get the current user name from $USER."""
    sources = _resolve(sources)
    return probe(_env_reader(sources, "USER"), _verbatim, fact="user")


def get_hostname(sources: HostSources | None = None) -> str:
    """Get the kernel hostname."""
    sources = _resolve(sources)
    return probe(_source_reader(sources, "hostname"), str.strip, fact="hostname")


def get_os(sources: HostSources | None = None) -> str:
    """Get the OS pretty name, or the platform string."""
    sources = _resolve(sources)
    return probe(
        _source_reader(sources, "os_release"),
        parse_pretty_name,
        default=platform_description(),
        fact="os",
    )


def get_kernel(sources: HostSources | None = None) -> str:
    """Get the kernel release."""
    sources = _resolve(sources)
    return probe(_source_reader(sources, "kernel"), str.strip, fact="kernel")


def get_uptime(sources: HostSources | None = None) -> str:
    """Get the time since boot as 'Xh Ym'."""
    sources = _resolve(sources)
    return probe(_source_reader(sources, "uptime"), parse_uptime, fact="uptime")


def get_shell(sources: HostSources | None = None) -> str:
    """Get the login shell from $SHELL."""
    sources = _resolve(sources)
    return probe(_env_reader(sources, "SHELL"), _verbatim, fact="shell")


def get_cpu(sources: HostSources | None = None) -> str:
    """Get the CPU model name."""
    sources = _resolve(sources)
    return probe(_source_reader(sources, "cpuinfo"), parse_cpu_model, fact="cpu")


def get_cpu_cores(sources: HostSources | None = None) -> str:
    """Get the number of logical processors."""
    sources = _resolve(sources)
    return probe(
        _source_reader(sources, "cpuinfo"), count_processors, fact="cpu_cores"
    )


def get_cpu_speed(sources: HostSources | None = None) -> str:
    """Get the current CPU clock in GHz."""
    sources = _resolve(sources)
    return probe(
        _source_reader(sources, "cpuinfo"), parse_cpu_speed, fact="cpu_speed"
    )


def get_memory(sources: HostSources | None = None) -> str:
    """Get used and total memory."""
    sources = _resolve(sources)
    return probe(
        _source_reader(sources, "meminfo"),
        lambda text: format_memory(parse_meminfo(text)),
        fact="memory",
    )


def collect_snapshot(sources: HostSources | None = None) -> HostSnapshot:
    """Collect every host fact into a HostSnapshot."""
    sources = _resolve(sources)
    snapshot = HostSnapshot(
        user=get_user(sources),
        hostname=get_hostname(sources),
        os=get_os(sources),
        kernel=get_kernel(sources),
        uptime=get_uptime(sources),
        shell=get_shell(sources),
        cpu=get_cpu(sources),
        cpu_cores=get_cpu_cores(sources),
        cpu_speed=get_cpu_speed(sources),
        memory=get_memory(sources),
    )
    logger.debug("Collected %s", snapshot)
    return snapshot
