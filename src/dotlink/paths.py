"""Relative path model used as the identity of mappings."""

from __future__ import annotations

import os
from pathlib import PurePosixPath

RelativePath = PurePosixPath


def normalize(path: str | os.PathLike[str]) -> RelativePath:
    """Return ``path`` as a ``RelativePath`` without a leading ``./``.

    Symlinks and ``..`` segments are left untouched; callers pass paths that are
    already relative to one of the two roots.
    """

    return RelativePath(os.fspath(path))


def is_prefix_of(prefix: RelativePath, path: RelativePath) -> bool:
    """Return ``True`` if ``path`` starts with every component of ``prefix``.

    A path is a prefix of itself. The comparison is component-wise and case
    sensitive, so ``.config`` is not a prefix of ``.config-old``.
    """

    count = len(prefix.parts)
    return path.parts[:count] == prefix.parts


def sort_key(path: RelativePath) -> tuple[str, ...]:
    return path.parts
