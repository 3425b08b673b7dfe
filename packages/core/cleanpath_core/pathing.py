"""Canonicalization of HTTP request paths.

A canonical path:
- begins with a single "/"
- has no empty, "." or ".." segments
- ends with "/" unless its last segment has a file extension
"""

from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "/"
ROOT = "/"


@dataclass(frozen=True)
class Unchanged:
    """The path is already canonical."""

    changed = False


@dataclass(frozen=True)
class Changed:
    """The path must be replaced by ``path``."""

    path: str
    changed = True


CanonicalizationResult = Unchanged | Changed

UNCHANGED = Unchanged()


def has_extension(path: str) -> bool:
    """Return True if the text after the last "." is non-empty and has no "/"."""
    index = path.rfind(".")
    if index == -1:
        return False
    suffix = path[index + 1 :]
    return bool(suffix) and SEPARATOR not in suffix


def is_canonical(path: str) -> bool:
    """Check whether ``path`` is canonical using substring tests only.

    Besides "no /.", "no //" and "extension XOR trailing slash", the path must
    start with "/", so relative input is never reported canonical.

    A False result does not mean the path will change: segments that merely
    start with a dot (``/.well-known/``) still go through the full rebuild.
    """
    return (
        path.startswith(SEPARATOR)
        and "/." not in path
        and "//" not in path
        and has_extension(path) != path.endswith(SEPARATOR)
    )


def resolve_segments(path: str) -> list[str]:
    """Fold the segments of ``path`` into a stack, dropping empty and dot segments.

    ".." pops the previous segment; above the root it is absorbed.
    """
    stack: list[str] = []
    for segment in path.split(SEPARATOR):
        if segment in ("", "."):
            continue
        if segment == "..":
            if stack:
                stack.pop()
            continue
        stack.append(segment)
    return stack


def canonicalize_path(path: str) -> str:
    """Return the canonical form of ``path``.

    Separators are merged and dot segments resolved. A trailing "/" is added
    when the original path ended with one or when the last segment has no
    extension. The root stays "/".
    """
    cleaned = ROOT + SEPARATOR.join(resolve_segments(path))
    if cleaned == ROOT:
        return cleaned
    if path.endswith(SEPARATOR) or not has_extension(cleaned):
        cleaned += SEPARATOR
    return cleaned


def normalize_path(path: str) -> CanonicalizationResult:
    """Canonicalize ``path``, reporting whether it differs from the input."""
    if is_canonical(path):
        return UNCHANGED
    canonical = canonicalize_path(path)
    if canonical == path:
        return UNCHANGED
    return Changed(canonical)
