#!/usr/bin/env python3
"""
Module initialization - imports all probes and provides a function to get them in report order.
"""

from typing import List, Optional

from .base import InfoProbe, SystemQuery, UNKNOWN

# Import all probes
from .system import (
    OSProbe, KernelProbe, UptimeProbe, DesktopProbe, TerminalProbe, ShellProbe, format_duration
)
from .hardware import CPUProbe, MemoryProbe, GPUProbe
from .storage import DiskProbe


def get_all_probes(query: Optional[SystemQuery] = None) -> List[InfoProbe]:
    """Return all probe instances, in the order they appear in the report."""
    query = query or SystemQuery()
    return [
        # System probes
        OSProbe(query),
        KernelProbe(query),
        UptimeProbe(query),
        DesktopProbe(query),
        TerminalProbe(query),
        ShellProbe(query),

        # Hardware and storage probes
        CPUProbe(query),
        MemoryProbe(query),
        DiskProbe(query),
        GPUProbe(query)
    ]
