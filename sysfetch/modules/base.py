#!/usr/bin/env python3
"""
Base classes shared by all information probes.
"""

import os
import platform
import socket
import subprocess
import time
import logging
from typing import Callable, Dict, List, Mapping, Optional

logger = logging.getLogger("sysfetch")

UNKNOWN = "Unknown"
COMMAND_TIMEOUT = 30


class SystemQuery:
    """Single access point for everything a probe reads from the host.

    Probes never touch the filesystem, the process table or the environment
    directly; they go through an instance of this class so tests can swap in
    canned data.
    """

    def __init__(self, platform_name: Optional[str] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self.platform = platform_name or platform.system().lower()
        self.environ = os.environ if environ is None else environ

    def run_command(self, command: List[str]) -> Optional[str]:
        """
        Run a command and return its stdout.

        Args:
            command: Command to run as a list of strings

        Returns:
            Command output, or None if the command is missing, times out
            or exits non-zero
        """
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
                timeout=COMMAND_TIMEOUT
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"Command timed out after {COMMAND_TIMEOUT} seconds: {' '.join(command)}")
            return None
        except OSError as e:
            logger.debug(f"Failed to run command {' '.join(command)}: {e}")
            return None

        if result.returncode != 0:
            logger.debug(f"Command {' '.join(command)} exited with {result.returncode}: {result.stderr.strip()}")
            return None
        return result.stdout

    def read_file(self, file_path: str) -> Optional[str]:
        """Read a file, returning None if it cannot be read."""
        try:
            with open(file_path, 'r', errors='replace') as f:
                return f.read()
        except FileNotFoundError:
            logger.debug(f"File not found: {file_path}")
        except PermissionError:
            logger.debug(f"Permission denied: {file_path}")
        except OSError as e:
            logger.debug(f"Failed to read file {file_path}: {e}")
        return None

    def getenv(self, key: str) -> str:
        return self.environ.get(key, "")

    def hostname(self) -> str:
        try:
            return socket.gethostname()
        except OSError as e:
            logger.debug(f"Hostname lookup failed: {e}")
            return ""

    def cpu_count(self) -> int:
        return os.cpu_count() or 1

    def parent_pid(self) -> int:
        return os.getppid()

    def now(self) -> float:
        return time.time()


class InfoProbe:
    """Base class for all information probes.

    Subclasses either fill ``collectors`` with one callable per supported
    platform or override ``collect`` for platform-independent sources.
    Whatever ``collect`` returns empty, or raises, becomes ``fallback``.
    """

    fallback = UNKNOWN
    optional = False

    def __init__(self, name: str, label: str, query: Optional[SystemQuery] = None):
        self.name = name
        self.label = label
        self.query = query or SystemQuery()
        self.collectors: Dict[str, Callable[[], Optional[str]]] = {}

    def collect(self) -> Optional[str]:
        """Dispatch to the collector registered for the current platform."""
        collector = self.collectors.get(self.query.platform)
        if collector is None:
            logger.debug(f"Probe {self.name} has no collector for platform {self.query.platform}")
            return None
        return collector()

    def run(self) -> str:
        """Run the probe and return a display string, never raising."""
        try:
            value = self.collect()
        except Exception as e:
            logger.debug(f"Probe {self.name} failed: {e}", exc_info=True)
            value = None
        return value if value else self.fallback
