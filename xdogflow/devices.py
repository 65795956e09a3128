"""Facts about compute devices used when describing them to the user."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

_CORES_PER_SM: Dict[Tuple[int, int], int] = {
    (1, 0): 8,
    (1, 1): 8,
    (1, 2): 8,
    (1, 3): 8,
    (2, 0): 32,
    (2, 1): 48,
}


def cores_per_multiprocessor(major: int, minor: int) -> Optional[int]:
    """Cores in one multiprocessor of the given compute capability, or ``None`` if unknown."""
    return _CORES_PER_SM.get((major, minor))


def format_version(version: int) -> str:
    """Render a packed driver or runtime version number as ``major.minor``.

    The major part is the thousands and the minor part the last two digits.
    """
    if version < 0:
        raise ValueError(f"version number must not be negative: {version}")
    return f"{version // 1000}.{version % 100}"