#!/usr/bin/env python3
"""
Report Generator for sysfetch.
"""

import json
import logging
from typing import List, Tuple

from ..modules.base import InfoProbe
from .logo import render_logo

logger = logging.getLogger("sysfetch.report")

# ANSI color codes
RESET = "\033[0m"
BOLD = "\033[1m"
BLUE = "\033[34m"
YELLOW = "\033[33m"
CYAN = "\033[36m"


def format_line(label: str, value: str) -> str:
    """Color a single ``label: value`` report line."""
    return f"{BOLD}{BLUE}{label}{RESET}: {YELLOW}{value}{RESET}"


class ReportGenerator:
    """Runs the probes in order and renders their results."""

    def __init__(self, probes: List[InfoProbe]):
        self.probes = probes

    def collect(self) -> List[Tuple[str, str]]:
        """Run each probe, keeping optional ones only when they found something."""
        entries = []
        for probe in self.probes:
            logger.debug(f"Running probe: {probe.name}")
            value = probe.run()
            if not value and probe.optional:
                logger.debug(f"Omitting empty optional probe: {probe.name}")
                continue
            entries.append((probe.label, value))
        return entries

    def generate(self) -> str:
        """Generate the colored text report, banner included."""
        report = [f"{CYAN}{render_logo()}{RESET}"]
        for label, value in self.collect():
            report.append(format_line(label, value))
        return "\n".join(report) + "\n"

    def generate_json(self) -> str:
        """Generate the report as a JSON object keyed by label."""
        return json.dumps(dict(self.collect()), indent=2, ensure_ascii=False)
