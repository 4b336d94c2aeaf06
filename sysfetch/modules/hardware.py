#!/usr/bin/env python3
"""
Hardware related probes: CPU, memory and GPU.
"""

from typing import Optional

from .base import InfoProbe, SystemQuery, UNKNOWN


class CPUProbe(InfoProbe):
    """CPU model name and logical core count."""

    def __init__(self, query: Optional[SystemQuery] = None):
        super().__init__("cpu", "CPU", query)
        self.collectors = {
            "linux": self._model_from_cpuinfo,
            "darwin": self._model_from_sysctl
        }

    def collect(self) -> str:
        cores = self.query.cpu_count()
        model = super().collect() or UNKNOWN
        return f"{model} ({cores} cores)"

    def _model_from_cpuinfo(self) -> Optional[str]:
        data = self.query.read_file("/proc/cpuinfo")
        if data is None:
            return None
        for line in data.splitlines():
            if line.startswith("model name"):
                parts = line.split(":")
                if len(parts) > 1:
                    return parts[1].strip()
        return None

    def _model_from_sysctl(self) -> Optional[str]:
        output = self.query.run_command(["sysctl", "-n", "machdep.cpu.brand_string"])
        if output is None:
            return None
        return output.strip()


class MemoryProbe(InfoProbe):
    """Physical memory usage.

    Linux reports used, total and percentage from /proc/meminfo. macOS only
    exposes the installed total through sysctl, so only that is shown there.
    """

    def __init__(self, query: Optional[SystemQuery] = None):
        super().__init__("memory", "Memory", query)
        self.collectors = {
            "linux": self._from_meminfo,
            "darwin": self._from_sysctl
        }

    def _from_meminfo(self) -> Optional[str]:
        data = self.query.read_file("/proc/meminfo")
        if data is None:
            return None

        total = available = 0
        for line in data.splitlines():
            if line.startswith("MemTotal:"):
                total = self._kilobytes(line)
            elif line.startswith("MemAvailable:"):
                available = self._kilobytes(line)

        if total <= 0:
            return None

        # Values are in kB
        used = total - available
        total_gb = total / 1024 / 1024
        used_gb = used / 1024 / 1024
        percent = used * 100 / total
        return f"{used_gb:.1f}G / {total_gb:.1f}G ({percent:.0f}%)"

    @staticmethod
    def _kilobytes(line: str) -> int:
        """Value of a ``Key:   1234 kB`` meminfo line, 0 when unreadable."""
        parts = line.split()
        if len(parts) < 2 or not parts[1].isdigit():
            return 0
        return int(parts[1])

    def _from_sysctl(self) -> Optional[str]:
        output = self.query.run_command(["sysctl", "-n", "hw.memsize"])
        if output is None:
            return None
        total_gb = int(output.strip()) / 1024 / 1024 / 1024
        return f"{total_gb:.1f}G"


class GPUProbe(InfoProbe):
    """Graphics adapter description. Left out of the report when not found."""

    fallback = ""
    optional = True

    def __init__(self, query: Optional[SystemQuery] = None):
        super().__init__("gpu", "GPU", query)
        self.collectors = {
            "linux": self._from_lspci,
            "darwin": self._from_system_profiler
        }

    def _from_lspci(self) -> Optional[str]:
        output = self.query.run_command(["lspci"])
        if output is None:
            return None
        for line in output.splitlines():
            lower = line.lower()
            if "vga" in lower or "3d" in lower:
                # "00:02.0 VGA compatible controller: Intel Corporation ..."
                parts = line.split(":")
                if len(parts) >= 3:
                    return parts[2].strip()
        return None

    def _from_system_profiler(self) -> Optional[str]:
        output = self.query.run_command(["system_profiler", "SPDisplaysDataType"])
        if output is None:
            return None
        for line in output.splitlines():
            if line.strip().startswith("Chipset Model:"):
                return line.split(":", 1)[1].strip()
        return None
