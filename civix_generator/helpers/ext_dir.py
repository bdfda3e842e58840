"""Locate the extension being worked on."""

from pathlib import Path

MANIFEST_FILE = "info.xml"


def find_ext_dir(start: Path | None = None) -> Path:
    """Get the base directory of the extension.

    Searches upwards from ``start`` (default: current working directory) for a
    directory containing ``info.xml``, so the command works from any
    subdirectory of an extension.

    Returns:
        Path to the extension base directory

    Note:
        Falls back to ``start`` when no manifest is found; loading the
        manifest then reports the missing file.
    """
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        if (parent / MANIFEST_FILE).is_file():
            return parent
    return current
