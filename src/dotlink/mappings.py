"""The validated set of configured mappings."""

from __future__ import annotations

import os
from typing import Iterable, Iterator

from .errors import (
    AbsoluteMappingError,
    DuplicateMappingError,
    ExistingChildError,
    ExistingParentError,
    InvalidMappingError,
    NestedMappingError,
)
from .paths import RelativePath, is_prefix_of, normalize, sort_key


def find_nested(mappings: Iterable[RelativePath]) -> tuple[RelativePath, RelativePath] | None:
    """Return the first ``(nested, parent)`` pair found in ``mappings``, if any.

    After sorting by components every descendant of a path directly follows it,
    so checking adjacent pairs finds a violation whenever one exists.
    """

    ordered = sorted(mappings, key=sort_key)
    for current, following in zip(ordered, ordered[1:]):
        if is_prefix_of(current, following):
            return following, current
    return None


def validate_mappings(mappings: Iterable[RelativePath]) -> None:
    """Raise ``NestedMappingError`` if any mapping is nested in another."""

    violation = find_nested(mappings)
    if violation is not None:
        nested, parent = violation
        raise NestedMappingError(nested, parent)


class MappingSet:
    """Ordered collection of mappings in which no entry contains another."""

    def __init__(self, mappings: Iterable[RelativePath] = ()) -> None:
        self._mappings: list[RelativePath] = list(mappings)
        validate_mappings(self._mappings)

    @classmethod
    def from_strings(cls, raw: Iterable[str | os.PathLike[str]]) -> "MappingSet":
        mappings: list[RelativePath] = []
        for value in raw:
            candidate = normalize(value)
            if candidate.is_absolute():
                raise AbsoluteMappingError(candidate)
            if not candidate.parts:
                raise InvalidMappingError(value, "a mapping must name a path inside the repository")
            if ".." in candidate.parts:
                raise InvalidMappingError(candidate, "a mapping must not escape the repository")
            mappings.append(candidate)
        return cls(mappings)

    def __contains__(self, path: object) -> bool:
        return path in self._mappings

    def __iter__(self) -> Iterator[RelativePath]:
        return iter(self._mappings)

    def __len__(self) -> int:
        return len(self._mappings)

    def __repr__(self) -> str:
        return f"MappingSet({[path.as_posix() for path in self._mappings]!r})"

    def check_addable(self, path: RelativePath) -> None:
        """Raise if ``path`` duplicates or nests with an existing mapping."""

        for mapping in self._mappings:
            if mapping == path:
                raise DuplicateMappingError(path)
            if is_prefix_of(mapping, path):
                raise ExistingParentError(path, mapping)
            if is_prefix_of(path, mapping):
                raise ExistingChildError(path, mapping)

    def add(self, path: RelativePath) -> None:
        self.check_addable(path)
        self._mappings.append(path)

    def as_strings(self) -> list[str]:
        return [path.as_posix() for path in self._mappings]
