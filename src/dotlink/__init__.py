"""Core package for the dotlink project."""

from .cli import app, run
from .config import AppConfig, config_file_path
from .errors import (
    BothPathsExistError,
    ConfigError,
    ContainsRepositoryError,
    DotlinkError,
    ExistingChildError,
    ExistingParentError,
    NestedMappingError,
    OutsideValidDirError,
)
from .manager import DotfilesManager
from .mappings import MappingSet
from .models import (
    AddMapping,
    CreateSymlink,
    EntryState,
    LinkState,
    LinkStatus,
    MoveFile,
    Plan,
    RepositoryEntry,
    StatusEntry,
    StatusReport,
)
from .version import __version__

__all__ = [
    "__version__",
    "AppConfig",
    "config_file_path",
    "DotfilesManager",
    "MappingSet",
    "DotlinkError",
    "ConfigError",
    "NestedMappingError",
    "ExistingParentError",
    "ExistingChildError",
    "OutsideValidDirError",
    "BothPathsExistError",
    "ContainsRepositoryError",
    "AddMapping",
    "CreateSymlink",
    "MoveFile",
    "Plan",
    "EntryState",
    "RepositoryEntry",
    "LinkState",
    "LinkStatus",
    "StatusEntry",
    "StatusReport",
    "app",
    "run",
]
