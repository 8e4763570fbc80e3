"""Pytest fixtures shared by the sysfetch tests."""

import pytest

from sysfetch.models import HostSnapshot
from sysfetch.sources import HostSources

CPUINFO = """\
processor\t: 0
vendor_id\t: GenuineIntel
model name\t: Intel(R) Core(TM) i7-8565U CPU @ 1.80GHz
cpu MHz\t\t: 2400.000

processor\t: 1
vendor_id\t: GenuineIntel
model name\t: Intel(R) Core(TM) i7-8565U CPU @ 1.80GHz
cpu MHz\t\t: 1800.000

"""

MEMINFO = """\
MemTotal:       16000000 kB
MemFree:         2000000 kB
MemAvailable:    8000000 kB
Buffers:          100000 kB
"""

OS_RELEASE = """\
NAME="Debian GNU/Linux"
PRETTY_NAME="Debian GNU/Linux 12 (bookworm)"
ID=debian
"""


def _write_files(root, files):
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


@pytest.fixture
def host_root(tmp_path):
    """A filesystem root laid out like a Linux host."""
    _write_files(
        tmp_path,
        {
            "proc/sys/kernel/hostname": "devbox\n",
            "proc/sys/kernel/osrelease": "6.1.0-18-amd64\n",
            "proc/uptime": "3665.0 1200.0\n",
            "proc/cpuinfo": CPUINFO,
            "proc/meminfo": MEMINFO,
            "etc/os-release": OS_RELEASE,
        },
    )
    return tmp_path


@pytest.fixture
def host_environ():
    """Environment with the variables sysfetch reads."""
    return {"USER": "alice", "SHELL": "/bin/zsh"}


@pytest.fixture
def sources(host_root, host_environ):
    """HostSources backed by the fake host."""
    return HostSources(host_root, host_environ)


@pytest.fixture
def empty_sources(tmp_path):
    """HostSources where nothing can be read."""
    return HostSources(tmp_path / "missing", {})


@pytest.fixture
def snapshot():
    """A fully populated HostSnapshot."""
    return HostSnapshot(
        user="alice",
        hostname="devbox",
        os="Debian GNU/Linux 12 (bookworm)",
        kernel="6.1.0-18-amd64",
        uptime="1h 1m",
        shell="/bin/zsh",
        cpu="Intel(R) Core(TM) i7-8565U ...",
        cpu_cores="2",
        cpu_speed="2.40GHz",
        memory="7.6GB / 15.3GB",
    )


@pytest.fixture
def write_host():
    """Write procfs-style files under a root, keyed by relative path."""
    return _write_files


@pytest.fixture
def sources_with(tmp_path, write_host):
    """Build HostSources over a fake host holding only the given files."""

    def build(files, environ=None):
        write_host(tmp_path, files)
        return HostSources(tmp_path, environ or {})

    return build
