from __future__ import annotations
import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from typesmith.internals.errors import TypesmithError

EXIT_OK = 0
EXIT_ERRORS = 2


class C:
    """ANSI color/style escape codes."""
    RESET = "\x1b[0m"
    BOLD  = "\x1b[1m"
    DIM   = "\x1b[2m"
    RED   = "\x1b[31m"
    CYAN  = "\x1b[36m"


@dataclass
class Diagnostic:
    code: str
    kind: str
    category: str
    message: str
    properties: Dict[str, Any] = field(default_factory=dict)
    source: Optional[str] = None  # Stage or input file the error came from

    @classmethod
    def from_error(cls, error: TypesmithError, source: Optional[str] = None) -> Diagnostic:
        d = error.to_dict()
        return cls(d["code"], d["kind"], d["category"], d["message"], d["properties"], source)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "code": self.code,
            "kind": self.kind,
            "category": self.category,
            "message": self.message,
            "properties": self.properties,
        }
        if self.source is not None:
            out["source"] = self.source
        return out


class Reporter:
    def __init__(self, source_name: str = "typesmith") -> None:
        self.source_name = source_name
        self.items: List[Diagnostic] = []

    def add(self, error: TypesmithError, source: Optional[str] = None) -> Diagnostic:
        d = Diagnostic.from_error(error, source)
        self.items.append(d)
        return d

    @property
    def has_errors(self) -> bool:
        return bool(self.items)

    def format(self, use_color: bool = True) -> str:
        """Render all diagnostics, one header line each."""
        out: List[str] = []
        for d in self.items:
            loc = d.source or self.source_name

            # Ensure message ends with period
            message = d.message if d.message.endswith('.') else f"{d.message}."

            if use_color:
                kind = f"{C.BOLD}{C.RED}error{C.RESET}"
                out.append(f"{C.CYAN}{loc}{C.RESET}: {kind} [{C.DIM}{d.code}{C.RESET}]: {message}")
            else:
                out.append(f"{loc}: error [{d.code}]: {message}")
        return "\n".join(out)

    def to_json(self) -> str:
        return json.dumps([d.to_dict() for d in self.items], indent=2, ensure_ascii=False)

    def print(self, stream=None, use_color: Optional[bool] = None) -> None:
        """Print diagnostics to `stream` (default: sys.stderr).

        Color is auto-enabled for TTY unless NO_COLOR or TERM=dumb.
        """
        stream = stream or sys.stderr

        if use_color is None:
            is_tty = getattr(stream, "isatty", lambda: False)()
            no_color = os.getenv("NO_COLOR") is not None
            dumb = os.getenv("TERM") == "dumb"
            use_color = bool(is_tty and not no_color and not dumb)

        text = self.format(use_color=use_color)
        if text:
            print(text, file=stream)

    def print_json(self, stream=None) -> None:
        print(self.to_json(), file=stream or sys.stdout)


def guard(action: Callable[[], Any], reporter: Reporter, source: Optional[str] = None) -> int:
    """Run one stage and turn a raised catalogue error into an exit code.

    Returns:
        EXIT_OK if `action` completed, EXIT_ERRORS if it raised a TypesmithError
        (recorded in `reporter`). Anything else propagates.
    """
    try:
        action()
    except TypesmithError as e:
        reporter.add(e, source)
        return EXIT_ERRORS
    return EXIT_OK
