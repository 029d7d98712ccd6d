from __future__ import annotations
import sys, platform

import lark

from typesmith import __version__ as app_ver, __dev__ as is_dev


def _get_versions() -> dict[str, str]:
    return {
        "app": app_ver,
        "python": platform.python_version(),
        "lark": lark.__version__,
    }


def print_banner(stream=None) -> None:
    stream = stream or sys.stdout
    v = _get_versions()

    # Only use ANSI styling if the stream is a TTY (interactive terminal)
    use_ansi = getattr(stream, "isatty", lambda: False)()

    if use_ansi:
        BOLD, DIM, RESET = "\x1b[1m", "\x1b[2m", "\x1b[0m"
    else:
        BOLD, DIM, RESET = "", "", ""

    dev_marker = " (dev)" if is_dev else ""
    print(
        f"{BOLD}typesmith error catalogue{RESET} • {v['app']}{dev_marker}\n"
        f"{DIM}Python {v['python']} • lark {v['lark']}{RESET}",
        file=stream,
    )
