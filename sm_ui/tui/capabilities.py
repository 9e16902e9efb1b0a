from __future__ import annotations

import sys


def is_tty_available() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()
