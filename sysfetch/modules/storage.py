#!/usr/bin/env python3
"""
Storage related probes.
"""

from typing import Optional

from .base import InfoProbe, SystemQuery


class DiskProbe(InfoProbe):
    """Usage of the root filesystem as reported by df."""

    def __init__(self, query: Optional[SystemQuery] = None):
        super().__init__("disk", "Disk", query)
        self.collectors = {
            "linux": self._from_df,
            "darwin": self._from_df
        }

    def _from_df(self) -> Optional[str]:
        output = self.query.run_command(["df", "-h", "/"])
        if output is None:
            return None

        # Filesystem  Size  Used  Avail  Use%  Mounted on
        lines = output.split("\n")
        if len(lines) < 2:
            return None
        fields = lines[1].split()
        if len(fields) < 5:
            return None
        return f"{fields[2]} / {fields[1]} ({fields[4]})"
