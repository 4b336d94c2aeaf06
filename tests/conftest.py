import pytest

from sysfetch.modules.base import SystemQuery


class FakeQuery(SystemQuery):
    """SystemQuery serving canned host data."""

    def __init__(self, platform_name="linux", files=None, commands=None, env=None,
                 hostname="testhost", cpu_count=8, parent_pid=4242, now=0.0):
        super().__init__(platform_name, environ=env or {})
        self.files = files or {}
        self.commands = commands or {}
        self._hostname = hostname
        self._cpu_count = cpu_count
        self._parent_pid = parent_pid
        self._now = now
        self.ran = []

    def run_command(self, command):
        self.ran.append(tuple(command))
        return self.commands.get(tuple(command))

    def read_file(self, file_path):
        return self.files.get(file_path)

    def hostname(self):
        return self._hostname

    def cpu_count(self):
        return self._cpu_count

    def parent_pid(self):
        return self._parent_pid

    def now(self):
        return self._now


@pytest.fixture
def make_query():
    return FakeQuery
