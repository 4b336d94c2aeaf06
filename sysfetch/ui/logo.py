#!/usr/bin/env python3
"""
Banner printed above the report.
"""

LOGO = """
       ▄████████▄
      ███▀▀  ▀▀███        ╔═══════════════════╗
     ██  ◉    ◉  ██       ║   SYSTEM  INFO    ║
     ██           ██      ╚═══════════════════╝
      ██  ╔═══╗  ██
       ██ ╚═══╝ ██        Building the brain
        ██     ██         of intelligent systems
         ███████
        ╔═╩═╩═╩═╗
        ║ ▓▓▓▓▓ ║
        ╚═══════╝
"""


def render_logo() -> str:
    return LOGO
