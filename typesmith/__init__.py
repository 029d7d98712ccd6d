"""typesmith - error catalogue and raising facility for the code generator."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("typesmith")
    __dev__ = False
except PackageNotFoundError:
    # Development mode - read from pyproject.toml
    import tomllib
    from pathlib import Path
    try:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            __version__ = tomllib.load(f).get("project", {}).get("version", "unknown")
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
    __dev__ = True

from typesmith.internals.messages import Category, ErrorKind
from typesmith.internals.errors import TypesmithError, ensure, raise_error

__all__ = ["Category", "ErrorKind", "TypesmithError", "ensure", "raise_error"]
