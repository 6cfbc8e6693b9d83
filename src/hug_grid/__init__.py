"""Top-level package for the Human Universal Gridder.

Provides subpackages:
- hug_grid.core – immutable grid models and schema validation
- hug_grid.layout – breakpoint resolution, template building and subgrid slicing
- hug_grid.theme – size tokens, breakpoints and theme loading
- hug_grid.output – CSS rendering and debug previews
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("hug-grid")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
