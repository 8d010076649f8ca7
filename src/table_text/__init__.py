"""Top-level package for Table Text.

Renders JSON-encoded question/answer conversations as rich text with
inline math, and coordinates re-typesetting by an external math engine.

Provides subpackages:
- table_text.parsing – JSON conversation parsing and per-element validation
- table_text.tokenizing – delimiter scanner and math tokenizer
- table_text.rendering – render node builder and HTML serialization
- table_text.typeset – debounced, single-flight typeset scheduler
- table_text.gui – PySide6 host view and demo app
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    import sys
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    if not getattr(sys, "frozen", False):
        pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    else:
        # In frozen mode, read from bundle root
        pyproject = Path(getattr(sys, "_MEIPASS", ".")) / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("table-text")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 Table Text contributors. Licensed under the Polyform Noncommercial License 1.0.0"
__all__: list[str] = ["__version__"]
