#!/usr/bin/env python3
"""
Operating system and session related probes.
"""

import re
from typing import Optional

from .base import InfoProbe, SystemQuery

BOOTTIME_PATTERN = re.compile(r'^\s*\{\s*sec\s*=\s*(\d+)')


def format_duration(seconds: float) -> str:
    """Render a duration as ``Xd Yh Zm``, dropping leading zero units."""
    total = max(int(seconds), 0)
    days = total // 86400
    hours = (total // 3600) % 24
    minutes = (total // 60) % 60

    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    elif hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


class OSProbe(InfoProbe):
    """Platform name and hostname."""

    def __init__(self, query: Optional[SystemQuery] = None):
        super().__init__("os", "OS", query)

    def collect(self) -> str:
        return f"{self.query.platform} ({self.query.hostname()})"


class KernelProbe(InfoProbe):
    """Kernel release string."""

    def __init__(self, query: Optional[SystemQuery] = None):
        super().__init__("kernel", "Kernel", query)
        self.collectors = {
            "linux": self._from_proc_version,
            "darwin": self._from_uname
        }

    def _from_proc_version(self) -> Optional[str]:
        data = self.query.read_file("/proc/version")
        if data is None:
            return None
        fields = data.split()
        if len(fields) >= 3:
            return fields[2]
        return None

    def _from_uname(self) -> Optional[str]:
        output = self.query.run_command(["uname", "-r"])
        if output is None:
            return None
        return output.strip()


class UptimeProbe(InfoProbe):
    """Time since boot."""

    def __init__(self, query: Optional[SystemQuery] = None):
        super().__init__("uptime", "Uptime", query)
        self.collectors = {
            "linux": self._from_proc_uptime,
            "darwin": self._from_boottime
        }

    def _from_proc_uptime(self) -> Optional[str]:
        data = self.query.read_file("/proc/uptime")
        if not data or not data.split():
            return None
        return format_duration(float(data.split()[0]))

    def _from_boottime(self) -> Optional[str]:
        # sysctl prints e.g. "{ sec = 1700000000, usec = 0 } Tue Nov 14 ..."
        output = self.query.run_command(["sysctl", "-n", "kern.boottime"])
        if output is None:
            return None
        match = BOOTTIME_PATTERN.match(output)
        if not match:
            return None
        return format_duration(self.query.now() - int(match.group(1)))


class DesktopProbe(InfoProbe):
    """Desktop environment, from session variables."""

    def __init__(self, query: Optional[SystemQuery] = None):
        super().__init__("de", "DE", query)

    def collect(self) -> Optional[str]:
        for variable in ("XDG_CURRENT_DESKTOP", "DESKTOP_SESSION"):
            value = self.query.getenv(variable)
            if value:
                return value

        # Presence-only markers
        if self.query.getenv("GNOME_DESKTOP_SESSION_ID"):
            return "GNOME"
        if self.query.getenv("KDE_FULL_SESSION"):
            return "KDE"
        return None


class TerminalProbe(InfoProbe):
    """Terminal emulator the tool runs in."""

    def __init__(self, query: Optional[SystemQuery] = None):
        super().__init__("terminal", "Terminal", query)
        self.collectors = {
            "linux": self._from_parent_cmdline
        }

    def collect(self) -> Optional[str]:
        term_program = self.query.getenv("TERM_PROGRAM")
        if term_program:
            return term_program

        # Parent process name, where the platform exposes it
        parent = super().collect()
        if parent:
            return parent

        return self.query.getenv("TERM") or None

    def _from_parent_cmdline(self) -> Optional[str]:
        data = self.query.read_file(f"/proc/{self.query.parent_pid()}/cmdline")
        if data is None:
            return None
        parts = data.replace("\x00", " ").split()
        if not parts:
            return None
        return parts[0].split("/")[-1]


class ShellProbe(InfoProbe):
    """Login shell executable name."""

    def __init__(self, query: Optional[SystemQuery] = None):
        super().__init__("shell", "Shell", query)

    def collect(self) -> Optional[str]:
        shell = self.query.getenv("SHELL")
        if not shell:
            return None
        return shell.split("/")[-1]
