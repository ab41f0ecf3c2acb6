from __future__ import annotations

from pathlib import Path

import pytest

from dotlink.errors import (
    BothPathsExistError,
    ContainsRepositoryError,
    DanglingLinkError,
    ExistingChildError,
    ExistingParentError,
    OutsideValidDirError,
)
from dotlink.mappings import MappingSet
from dotlink.models import AddMapping, CreateSymlink, MoveFile
from dotlink.paths import normalize
from dotlink.planner import (
    SKIP_ALREADY_LINKED,
    SKIP_ALREADY_MAPPED,
    mapping_path_for,
    plan_add,
)


def test_home_only_path_is_moved_then_linked(repo: Path, fake_home: Path) -> None:
    candidate = fake_home / ".zshrc"
    candidate.write_text("export EDITOR=vim\n")

    plan = plan_add(MappingSet(), repo, fake_home, candidate)

    assert plan.path == normalize(".zshrc")
    assert plan.changes == (
        AddMapping(normalize(".zshrc")),
        MoveFile(fake_home / ".zshrc", repo / ".zshrc"),
        CreateSymlink(fake_home / ".zshrc", repo / ".zshrc"),
    )
    assert plan.skipped == ()


def test_repository_only_path_is_linked(repo: Path, fake_home: Path) -> None:
    candidate = repo / ".config" / "app"
    candidate.mkdir(parents=True)

    plan = plan_add(MappingSet(), repo, fake_home, candidate)

    assert plan.changes == (
        AddMapping(normalize(".config/app")),
        CreateSymlink(fake_home / ".config" / "app", repo / ".config" / "app"),
    )


def test_already_mapped_path_skips_config_update(repo: Path, fake_home: Path) -> None:
    candidate = repo / ".zshrc"
    candidate.write_text("repo\n")

    plan = plan_add(MappingSet.from_strings([".zshrc"]), repo, fake_home, candidate)

    assert plan.skipped == (SKIP_ALREADY_MAPPED,)
    assert plan.changes == (CreateSymlink(fake_home / ".zshrc", repo / ".zshrc"),)


def test_linked_and_mapped_path_is_fully_skippable(repo: Path, fake_home: Path) -> None:
    (repo / ".zshrc").write_text("repo\n")
    (fake_home / ".zshrc").symlink_to(repo / ".zshrc")

    plan = plan_add(MappingSet.from_strings([".zshrc"]), repo, fake_home, fake_home / ".zshrc")

    assert plan.is_noop
    assert plan.skipped == (SKIP_ALREADY_MAPPED, SKIP_ALREADY_LINKED)


def test_both_paths_existing_is_rejected(repo: Path, fake_home: Path) -> None:
    (repo / ".zshrc").write_text("same\n")
    (fake_home / ".zshrc").write_text("same\n")

    with pytest.raises(BothPathsExistError) as excinfo:
        plan_add(MappingSet(), repo, fake_home, fake_home / ".zshrc")

    assert excinfo.value.repo_path == repo / ".zshrc"
    assert excinfo.value.home_path == fake_home / ".zshrc"


def test_home_symlink_to_elsewhere_with_repository_copy_is_rejected(
    repo: Path, fake_home: Path, tmp_path: Path
) -> None:
    (repo / ".zshrc").write_text("repo\n")
    (tmp_path / "other").write_text("other\n")
    (fake_home / ".zshrc").symlink_to(tmp_path / "other")

    with pytest.raises(BothPathsExistError):
        plan_add(MappingSet(), repo, fake_home, repo / ".zshrc")


def test_link_to_missing_repository_path_is_rejected(repo: Path, fake_home: Path) -> None:
    (fake_home / ".zshrc").symlink_to(repo / ".zshrc")

    with pytest.raises(DanglingLinkError):
        plan_add(MappingSet.from_strings([".zshrc"]), repo, fake_home, fake_home / ".zshrc")


def test_ancestor_of_existing_mapping_is_rejected(repo: Path, fake_home: Path) -> None:
    candidate = fake_home / ".config"
    (candidate / "app").mkdir(parents=True)

    with pytest.raises(ExistingChildError) as excinfo:
        plan_add(MappingSet.from_strings([".config/app"]), repo, fake_home, candidate)

    assert excinfo.value.child == normalize(".config/app")


def test_descendant_of_existing_mapping_is_rejected(repo: Path, fake_home: Path) -> None:
    candidate = repo / ".config" / "app" / "settings.json"
    candidate.parent.mkdir(parents=True)
    candidate.write_text("{}\n")

    with pytest.raises(ExistingParentError) as excinfo:
        plan_add(MappingSet.from_strings([".config/app"]), repo, fake_home, candidate)

    assert excinfo.value.parent == normalize(".config/app")


def test_path_outside_both_roots_is_rejected(repo: Path, fake_home: Path, tmp_path: Path) -> None:
    candidate = tmp_path / "elsewhere.txt"
    candidate.write_text("x\n")

    with pytest.raises(OutsideValidDirError):
        plan_add(MappingSet(), repo, fake_home, candidate)


def test_root_itself_is_rejected(repo: Path, fake_home: Path) -> None:
    with pytest.raises(OutsideValidDirError):
        plan_add(MappingSet(), repo, fake_home, repo)


def test_repository_inside_home_takes_precedence(fake_home: Path) -> None:
    repo = fake_home / "dotfiles"
    (repo / ".config" / "app").mkdir(parents=True)

    assert mapping_path_for(repo / ".config" / "app", repo, fake_home) == normalize(".config/app")
    assert mapping_path_for(fake_home / ".zshrc", repo, fake_home) == normalize(".zshrc")

    plan = plan_add(MappingSet(), repo, fake_home, repo / ".config" / "app")

    assert plan.changes == (
        AddMapping(normalize(".config/app")),
        CreateSymlink(fake_home / ".config" / "app", repo / ".config" / "app"),
    )


def test_home_path_containing_repository_is_rejected(fake_home: Path) -> None:
    repo = fake_home / "code" / "dotfiles"
    (repo / ".zshrc").parent.mkdir(parents=True)
    (repo / ".zshrc").write_text("repo\n")
    mappings = MappingSet()

    with pytest.raises(ContainsRepositoryError) as excinfo:
        plan_add(mappings, repo, fake_home, fake_home / "code")

    assert excinfo.value.path == fake_home / "code"
    assert excinfo.value.repo_root == repo
    assert len(mappings) == 0


def test_planning_does_not_touch_filesystem(repo: Path, fake_home: Path) -> None:
    candidate = fake_home / ".zshrc"
    candidate.write_text("home\n")

    plan_add(MappingSet(), repo, fake_home, candidate)

    assert candidate.is_file() and not candidate.is_symlink()
    assert not (repo / ".zshrc").exists()
