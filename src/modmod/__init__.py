"""Top-level package for modmod.

Provides subpackages:
- modmod.slides – content model, staged builder and the slide deck renderer
- modmod.common – tag derivation and file helpers shared by the renderers
"""

def _get_version() -> str:
    """Get version from pyproject.toml (source checkout) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        in_project = False
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if stripped.startswith("[") and stripped.endswith("]"):
                in_project = stripped == "[project]"
                continue
            if in_project and stripped.startswith("version"):
                # Parse: version = "0.3.1"
                return stripped.split("=", 1)[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("modmod")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
