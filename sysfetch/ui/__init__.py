#!/usr/bin/env python3
"""
UI package - banner and report rendering.
"""

from .logo import render_logo
from .report import ReportGenerator, format_line
