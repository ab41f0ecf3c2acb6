"""Exception hierarchy for dotlink."""

from __future__ import annotations

from pathlib import Path, PurePath


class DotlinkError(RuntimeError):
    """Raised when dotlink encounters an unrecoverable state."""


class ConfigError(DotlinkError):
    """Raised when a configuration file cannot be located, parsed or validated."""


class AbsoluteMappingError(ConfigError):
    def __init__(self, path: PurePath) -> None:
        self.path = path
        super().__init__(
            f"Found an absolute path in the configured mappings: '{path}'. "
            "Mappings must be relative to the root of your dotfiles repository."
        )


class InvalidMappingError(ConfigError):
    def __init__(self, path: PurePath | str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid mapping '{path}': {reason}")


class NestedMappingError(ConfigError):
    """Two configured mappings are nested inside each other."""

    def __init__(self, nested: PurePath, parent: PurePath) -> None:
        self.nested = nested
        self.parent = parent
        super().__init__(f"Invalid mappings in config: the mapping '{nested}' is nested in the mapping '{parent}'")


class MappingConflictError(DotlinkError):
    """Base class for rejected additions to a mapping set."""

    def __init__(self, path: PurePath, other: PurePath, message: str) -> None:
        self.path = path
        self.other = other
        super().__init__(message)


class DuplicateMappingError(MappingConflictError):
    def __init__(self, path: PurePath) -> None:
        super().__init__(path, path, f"The path '{path}' is already mapped")


class ExistingParentError(MappingConflictError):
    """An existing mapping is an ancestor of the candidate path."""

    def __init__(self, path: PurePath, parent: PurePath) -> None:
        self.parent = parent
        super().__init__(
            path,
            parent,
            f"Cannot add '{path}': it is nested in the existing mapping '{parent}'. "
            "Nested mappings are not supported.",
        )


class ExistingChildError(MappingConflictError):
    """An existing mapping is a descendant of the candidate path."""

    def __init__(self, path: PurePath, child: PurePath) -> None:
        self.child = child
        super().__init__(
            path,
            child,
            f"Cannot add '{path}': the existing mapping '{child}' is nested in it. "
            "Nested mappings are not supported.",
        )


class OutsideValidDirError(DotlinkError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"'{path}' must be inside either your home or your dotfiles directory")


class BothPathsExistError(DotlinkError):
    def __init__(self, repo_path: Path, home_path: Path) -> None:
        self.repo_path = repo_path
        self.home_path = home_path
        super().__init__(
            f"Both '{repo_path}' and '{home_path}' already exist. Remove one of them and run this command again."
        )


class DanglingLinkError(DotlinkError):
    def __init__(self, home_path: Path, repo_path: Path) -> None:
        self.home_path = home_path
        self.repo_path = repo_path
        super().__init__(
            f"'{home_path}' already links to '{repo_path}', which does not exist. "
            "Restore the repository copy or remove the link and run this command again."
        )


class PathNotFoundError(DotlinkError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"The given path '{path}' does not exist")


class FilesystemError(DotlinkError):
    """Wraps an ``OSError`` with the operation and path that failed."""

    def __init__(self, operation: str, path: Path, cause: OSError) -> None:
        self.operation = operation
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Could not {operation} '{path}': {reason}")


class ContainsRepositoryError(DotlinkError):
    """The candidate path is an ancestor of the dotfiles repository."""

    def __init__(self, path: Path, repo_root: Path) -> None:
        self.path = path
        self.repo_root = repo_root
        super().__init__(
            f"Cannot add '{path}': it contains your dotfiles directory '{repo_root}'. "
            "Add the entries next to the repository individually instead."
        )


class MissingConfigError(ConfigError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Configuration file '{path}' does not exist")
