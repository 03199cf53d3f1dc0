"""Top-level package for the date/time picker.

Provides subpackages:
- datetime_picker.core – calendar math, Instant/DateRange/column models, errors
- datetime_picker.engine – boundary propagation, selection controller, session
- datetime_picker.formatting – display patterns and locale tables
- datetime_picker.gui – PySide6 picker widget and dialog
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    import tomllib
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            with pyproject.open("rb") as f:
                return tomllib.load(f)["project"]["version"]
        except (OSError, tomllib.TOMLDecodeError, KeyError):
            pass

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("datetime_picker")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
