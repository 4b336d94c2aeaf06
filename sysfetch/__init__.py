#!/usr/bin/env python3
"""
sysfetch

Collects local host information (OS, kernel, uptime, desktop, terminal,
shell, CPU, memory, disk, GPU) and prints it as a decorated, colored report.
"""

__version__ = "1.0.0"
