"""Path decomposition and traversal detection.

Components are classified the same way on every host: Windows drive letters,
UNC shares and verbatim/device prefixes are recognised even on POSIX, and both
``/`` and ``\\`` separate segments.
"""

import enum
import os
import re
from typing import NamedTuple


class ComponentKind(enum.Enum):
    CURRENT_DIR = "current_dir"
    PARENT_DIR = "parent_dir"
    ROOT_DIR = "root_dir"
    PREFIX = "prefix"
    NORMAL = "normal"


class PathComponent(NamedTuple):
    kind: ComponentKind
    text: str


_SAFE_KINDS = frozenset({ComponentKind.CURRENT_DIR, ComponentKind.NORMAL})

_SEPARATORS = ("/", "\\")
_SEPARATOR_RE = re.compile(r"[\\/]")
_PREFIX_RE = re.compile(
    r"""
    (?:
        [\\/]{2}\?[\\/]UNC[\\/][^\\/]*(?:[\\/][^\\/]*)?   # \\?\UNC\server\share
      | [\\/]{2}[?.][\\/][^\\/]*                        # \\?\C:, \\.\COM1
      | [\\/]{2}[^\\/]+(?:[\\/][^\\/]*)?                # \\server\share
      | [A-Za-z]:                                       # C:
    )
    """,
    re.VERBOSE,
)


def _as_text(raw: str | os.PathLike[str]) -> str:
    value = os.fspath(raw)
    if not isinstance(value, str):
        raise TypeError(f"expected str or os.PathLike[str], got {type(value).__name__}")
    return value


def split_components(raw: str | os.PathLike[str]) -> list[PathComponent]:
    """
    Decompose raw into components, left to right.
    Leading prefix (drive, UNC, verbatim) first, then a root marker if a separator
    follows, then one component per non-empty segment. "." segments are kept.
    """
    text = _as_text(raw)
    components: list[PathComponent] = []

    match = _PREFIX_RE.match(text)
    if match:
        components.append(PathComponent(ComponentKind.PREFIX, match.group(0)))
        text = text[match.end():]
    if text.startswith(_SEPARATORS):
        components.append(PathComponent(ComponentKind.ROOT_DIR, text[0]))

    for segment in _SEPARATOR_RE.split(text):
        if not segment:
            continue
        if segment == ".":
            components.append(PathComponent(ComponentKind.CURRENT_DIR, segment))
        elif segment == "..":
            components.append(PathComponent(ComponentKind.PARENT_DIR, segment))
        else:
            components.append(PathComponent(ComponentKind.NORMAL, segment))
    return components


def is_traversal_attack(raw: str | os.PathLike[str]) -> bool:
    """True if any component of raw is a parent dir, root or platform prefix."""
    return any(c.kind not in _SAFE_KINDS for c in split_components(raw))
