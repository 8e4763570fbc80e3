"""Raw host information sources for sysfetch."""

import logging
import os
import platform
import socket
import time
from collections.abc import Mapping
from pathlib import Path

import psutil

logger = logging.getLogger(__name__)

# Source name -> location relative to the filesystem root.
PROCFS_PATHS: dict[str, str] = {
    "hostname": "proc/sys/kernel/hostname",
    "os_release": "etc/os-release",
    "kernel": "proc/sys/kernel/osrelease",
    "uptime": "proc/uptime",
    "cpuinfo": "proc/cpuinfo",
    "meminfo": "proc/meminfo",
}


class HostSources:
    """
    Text sources read from procfs and /etc under a filesystem root.

    Tests point ``root`` at a temporary directory laid out like a Linux host
    and pass their own ``environ`` mapping.
    """

    def __init__(
        self,
        root: str | Path = "/",
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """
        Initialize HostSources.

        Args:
            root: Filesystem root the procfs paths are resolved against.
            environ: Environment mapping. Defaults to ``os.environ``.
        """
        self._root = Path(root)
        self._environ = os.environ if environ is None else environ

    @property
    def root(self) -> Path:
        """Get the filesystem root."""
        return self._root

    def path_for(self, name: str) -> Path:
        """Get the file path backing a named source."""
        return self._root / PROCFS_PATHS[name]

    def read(self, name: str) -> str:
        """
        Read the full text of a named source.

        Raises:
            KeyError: If the source name is unknown.
            OSError: If the source cannot be read.
        """
        path = self.path_for(name)
        logger.debug("Reading %s from %s", name, path)
        return path.read_text(encoding="utf-8")

    def getenv(self, name: str) -> str | None:
        """Get an environment variable, or None when unset."""
        return self._environ.get(name)


class PsutilSources(HostSources):
    """
    Best-effort sources for hosts without procfs.

    Synthesises procfs-shaped text from psutil, socket and platform so the
    same extractors apply. There is no os-release equivalent, so the OS fact
    falls back to the platform string.
    """

    def read(self, name: str) -> str:
        """Produce procfs-shaped text for a named source."""
        readers = {
            "hostname": self._hostname,
            "os_release": self._os_release,
            "kernel": self._kernel,
            "uptime": self._uptime,
            "cpuinfo": self._cpuinfo,
            "meminfo": self._meminfo,
        }
        reader = readers[name]
        logger.debug("Synthesising %s from psutil", name)
        try:
            return reader()
        except psutil.Error as e:
            raise OSError(f"psutil could not read {name}: {e}") from e

    def _hostname(self) -> str:
        return socket.gethostname()

    def _os_release(self) -> str:
        raise OSError("os-release is not available on this platform")

    def _kernel(self) -> str:
        return platform.release()

    def _uptime(self) -> str:
        uptime = time.time() - psutil.boot_time()
        return f"{uptime:.2f} 0.00\n"

    def _cpuinfo(self) -> str:
        count = psutil.cpu_count(logical=True)
        if not count:
            raise OSError("logical CPU count is not available")

        lines = []
        model = platform.processor()
        freq = psutil.cpu_freq()
        for index in range(count):
            lines.append(f"processor\t: {index}")
            if model:
                lines.append(f"model name\t: {model}")
            if freq is not None:
                lines.append(f"cpu MHz\t\t: {freq.current:.3f}")
            lines.append("")
        return "\n".join(lines)

    def _meminfo(self) -> str:
        mem = psutil.virtual_memory()
        return (
            f"MemTotal:       {mem.total // 1024} kB\n"
            f"MemAvailable:   {mem.available // 1024} kB\n"
        )


def default_sources() -> HostSources:
    """Get the sources for the running host."""
    if Path("/proc").is_dir():
        return HostSources()
    logger.debug("No procfs found, using psutil sources")
    return PsutilSources()
