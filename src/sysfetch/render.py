"""Logo and fact rendering for sysfetch."""

import sys
from enum import Enum
from typing import TextIO

from sysfetch.models import HostSnapshot

LOGO: tuple[str, ...] = (
    "           |     |",
    "            \\   /",
    "             \\_/",
    "        __   /^\\   __",
    "       '  `. \\_/ ,'  `",
    "            \\/ \\/",
    "       _,--./| |\\.--._",
    "    _,'   _.-\\_/-._  `._",
    "         |   / \\   |",
    "         |  /   \\  |",
    "        /   |   |   \\",
    "      -'    \\___/    `-",
)

COLOR = "\x1b[36m"  # cyan
RESET = "\x1b[0m"

# Column where fact text starts in the fixed-gutter layout.
GUTTER = 30
HEADER_WIDTH = GUTTER + 30


class Layout(Enum):
    """Layout strategies for the logo and facts."""

    FIXED_GUTTER = "fixed-gutter"
    EQUAL_ROW = "equal-row"


def build_labels(snapshot: HostSnapshot) -> list[tuple[str, str]]:
    """Get the ordered (label, value) pairs shown next to the logo."""
    return [
        ("OS", snapshot.os),
        ("Host", snapshot.hostname),
        ("Kernel", snapshot.kernel),
        ("Uptime", snapshot.uptime),
        ("Shell", snapshot.shell),
        ("CPU", f"{snapshot.cpu} ({snapshot.cpu_cores}) @ {snapshot.cpu_speed}"),
        ("Memory", snapshot.memory),
    ]


def render_fixed_gutter(
    snapshot: HostSnapshot, logo: tuple[str, ...] = LOGO
) -> list[str]:
    """
    Render a 'user@host' header, then the logo with facts in a fixed column.

    Logo row i (1-based, up to the number of labels) carries label i - 1.
    Labels that do not fit beside the logo are dropped.
    """
    labels = build_labels(snapshot)
    user_host = f"{COLOR}{snapshot.user}@{snapshot.hostname}{RESET}"
    lines = [f"{user_host:>{HEADER_WIDTH}}"]

    for i, logo_line in enumerate(logo):
        colored_logo = f"{COLOR}{logo_line}{RESET}"
        if 1 <= i <= len(labels):
            label, value = labels[i - 1]
            padding = max(GUTTER - len(logo_line), 1)
            info_text = f"{COLOR}{label}:{RESET} {value}"
            lines.append(f"{colored_logo}{' ' * padding}{info_text}")
        else:
            lines.append(colored_logo)
    return lines


def render_equal_row(
    snapshot: HostSnapshot, logo: tuple[str, ...] = LOGO
) -> list[str]:
    """
    Render the logo and facts side by side, row for row.

    Rows run to the longer of the two; a missing logo row is blank padding
    of the first logo line's width.
    """
    labels = build_labels(snapshot)
    width = len(logo[0]) if logo else 0
    lines = []

    for i in range(max(len(logo), len(labels))):
        if i < len(logo):
            line = f"{COLOR}{logo[i].ljust(width)}{RESET}"
        else:
            line = " " * width
        if i < len(labels):
            label, value = labels[i]
            line += f"  {COLOR}{label}: {value}{RESET}"
        lines.append(line)
    return lines


def render_lines(
    snapshot: HostSnapshot, layout: Layout = Layout.FIXED_GUTTER
) -> list[str]:
    """Render a snapshot with the given layout."""
    if layout is Layout.EQUAL_ROW:
        return render_equal_row(snapshot)
    return render_fixed_gutter(snapshot)


def render(
    snapshot: HostSnapshot,
    layout: Layout = Layout.FIXED_GUTTER,
    stream: TextIO | None = None,
) -> None:
    """Write a rendered snapshot to a stream, stdout by default."""
    stream = sys.stdout if stream is None else stream
    for line in render_lines(snapshot, layout):
        stream.write(f"{line}\n")
    stream.flush()
