"""Default locations for files saved next to an input picture."""

from __future__ import annotations

import os
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


def _base_name(path: str) -> str:
    """The file name without its directory and without anything from the first dot on."""
    name = os.path.basename(path)
    return name.split(".", 1)[0]


def settings_filename(
    input_path: PathLike,
    output_path: Optional[PathLike] = None,
    suffix: str = ".ini",
) -> str:
    """Suggested path for a file derived from ``input_path``.

    The file lands in the directory of ``output_path`` (which defaults to
    ``input_path``) and is named after the input's base name, the part of
    its file name before the first dot, followed by ``suffix``. When the
    input has no base name, the absolute directory of ``output_path`` is
    returned instead.
    """
    source = os.fspath(input_path)
    target = source if output_path is None else os.fspath(output_path)
    directory = os.path.abspath(os.path.dirname(target))
    base = _base_name(source)
    if not base:
        return directory
    return os.path.join(directory, base + suffix)