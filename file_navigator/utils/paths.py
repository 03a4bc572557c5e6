"""Name and path helpers shared by the navigation commands.

The extension rule is a heuristic kept for compatibility: a name "has an
extension" only when its last dot-separated part is exactly three ASCII letters.
"""

from __future__ import annotations

import os
import re
from typing import Optional

_EXTENSION_RE = re.compile(r"[a-zA-Z]{3}")


def get_extension(name: str) -> Optional[str]:
    """Return the qualifying extension of ``name``, or None.

    >>> get_extension("notes.txt")
    'txt'
    >>> get_extension("archive") is None
    True
    >>> get_extension("photo.jpeg") is None
    True
    """
    parts = name.split(".")
    if len(parts) == 1:
        return None
    extension = parts[-1]
    if _EXTENSION_RE.fullmatch(extension):
        return extension
    return None


def has_extension(name: str) -> bool:
    return get_extension(name) is not None


def normalize_dir(path: str) -> str:
    s = os.path.expanduser(str(path or "").strip())
    if not os.path.isabs(s):
        s = os.path.abspath(os.path.join(os.getcwd(), s))
    return os.path.normpath(s)


def is_root(path: str, root: str) -> bool:
    """True when ``path`` and ``root`` name the same location after normalisation."""
    return os.path.normpath(path) == os.path.normpath(root)


def join_child(directory: str, name: str) -> str:
    return os.path.join(directory, name)


def parent_of(path: str) -> str:
    return os.path.dirname(os.path.normpath(path))
