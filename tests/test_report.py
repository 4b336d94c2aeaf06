import json
import logging
import re

import pytest

import sysfetch
from sysfetch import main as cli
from sysfetch.modules import get_all_probes
from sysfetch.modules.base import InfoProbe
from sysfetch.ui.logo import LOGO, render_logo
from sysfetch.ui.report import CYAN, RESET, ReportGenerator, format_line

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

LABELS = ["OS", "Kernel", "Uptime", "DE", "Terminal", "Shell", "CPU", "Memory", "Disk"]


def linux_host(make_query, with_gpu=True):
    commands = {("df", "-h", "/"): "Filesystem Size Used Avail Use% Mounted on\n/dev/sda1 50G 20G 30G 40% /\n"}
    if with_gpu:
        commands[("lspci",)] = "00:02.0 VGA compatible controller: Intel Corporation HD Graphics 620\n"
    return make_query(
        "linux",
        files={
            "/proc/version": "Linux version 6.1.0-18-amd64 (debian-kernel@lists.debian.org)\n",
            "/proc/uptime": "5400.00 1000.00\n",
            "/proc/meminfo": "MemTotal: 16777216 kB\nMemAvailable: 8388608 kB\n",
            "/proc/cpuinfo": "model name\t: Test CPU\n",
        },
        commands=commands,
        env={"SHELL": "/usr/bin/zsh", "TERM_PROGRAM": "iTerm.app", "XDG_CURRENT_DESKTOP": "GNOME"},
        hostname="box",
        cpu_count=4,
    )


def plain_lines(text):
    return [ANSI_RE.sub("", line) for line in text.splitlines()]


def test_format_line():
    line = format_line("Shell", "zsh")
    assert ANSI_RE.sub("", line) == "Shell: zsh"
    assert line.startswith("\033[1m\033[34mShell\033[0m")
    assert line.endswith("\033[33mzsh\033[0m")


def test_logo_is_static():
    assert render_logo() == render_logo() == LOGO
    assert "SYSTEM  INFO" in LOGO


def test_probe_order(make_query):
    probes = get_all_probes(make_query())
    assert [p.label for p in probes] == LABELS + ["GPU"]


def test_report_full(make_query):
    report = ReportGenerator(get_all_probes(linux_host(make_query))).generate()

    assert report.startswith(CYAN + LOGO + RESET + "\n")
    lines = [line for line in plain_lines(report[len(CYAN + LOGO + RESET):]) if line]
    assert lines == [
        "OS: linux (box)",
        "Kernel: 6.1.0-18-amd64",
        "Uptime: 1h 30m",
        "DE: GNOME",
        "Terminal: iTerm.app",
        "Shell: zsh",
        "CPU: Test CPU (4 cores)",
        "Memory: 8.0G / 16.0G (50%)",
        "Disk: 20G / 50G (40%)",
        "GPU: Intel Corporation HD Graphics 620",
    ]


def test_report_omits_empty_gpu_only(make_query):
    report = ReportGenerator(get_all_probes(make_query("windows"))).generate()
    lines = [line for line in plain_lines(report) if ": " in line]

    assert [line.split(":")[0] for line in lines] == LABELS
    assert "Shell: Unknown" in lines
    assert not any(line.startswith("GPU") for line in lines)


def test_broken_probe_never_raises(make_query):
    class BrokenProbe(InfoProbe):
        def collect(self):
            raise RuntimeError("boom")

    entries = ReportGenerator([BrokenProbe("broken", "Broken", make_query())]).collect()
    assert entries == [("Broken", "Unknown")]


def test_json_report(make_query):
    data = json.loads(ReportGenerator(get_all_probes(linux_host(make_query, with_gpu=False))).generate_json())
    assert list(data) == LABELS
    assert data["Memory"] == "8.0G / 16.0G (50%)"


def test_main_text(make_query, monkeypatch, capsys):
    monkeypatch.setattr(cli, "SystemQuery", lambda: linux_host(make_query))
    assert cli.main([]) == 0

    out = capsys.readouterr().out
    labels = [line.split(":")[0] for line in plain_lines(out) if ": " in line]
    assert labels == LABELS + ["GPU"]


def test_main_json(make_query, monkeypatch, capsys):
    monkeypatch.setattr(cli, "SystemQuery", lambda: linux_host(make_query, with_gpu=False))
    assert cli.main(["--format", "json"]) == 0

    out = capsys.readouterr().out
    assert "\033[" not in out
    assert json.loads(out)["Terminal"] == "iTerm.app"


def test_main_version(capsys):
    assert cli.main(["--version"]) == 0
    assert sysfetch.__version__ in capsys.readouterr().out


def test_main_ctrl_c_warns_and_exits_cleanly(monkeypatch, caplog, capsys):
    class InterruptedReport:
        def __init__(self, probes):
            pass

        def generate(self):
            raise KeyboardInterrupt

    monkeypatch.setattr(cli, "get_all_probes", lambda query: [])
    monkeypatch.setattr(cli, "ReportGenerator", InterruptedReport)

    with caplog.at_level(logging.WARNING, logger="sysfetch"):
        assert cli.main([]) == 0

    assert "Operation cancelled by user." in caplog.text
    assert capsys.readouterr().out == ""


def test_main_rejects_unknown_flag():
    with pytest.raises(SystemExit):
        cli.main(["--bogus"])
