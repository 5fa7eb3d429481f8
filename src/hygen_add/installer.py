"""Copy the generators of a resolved template package into a templates root."""

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from hygen_add.errors import CopyError

logger = logging.getLogger(__name__)

ADDED = "added"
SKIPPED = "skipped"


def target_name(entry_name: str, prefix: str | None = None) -> str:
    """Return the destination name of a generator, prefixed when a prefix is set."""
    if prefix:
        return f"{prefix}-{entry_name}"
    return entry_name


@dataclass(frozen=True)
class CopyPlanEntry:
    source_entry_path: Path
    target_entry_path: Path
    conflicts: bool

    @property
    def target_name(self) -> str:
        return self.target_entry_path.name


@dataclass
class InstallSummary:
    added: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    outcomes: list[tuple[str, str]] = field(default_factory=list)

    def record(self, status, name):
        self.outcomes.append((status, name))
        if status == ADDED:
            self.added.append(name)
        else:
            self.skipped.append(name)


def plan_install(source_path, dest_root, *, prefix=None) -> list[CopyPlanEntry]:
    """Compute one CopyPlanEntry per immediate child of source_path, sorted by name."""
    source_path = Path(source_path)
    dest_root = Path(dest_root)
    try:
        names = sorted(os.listdir(source_path))
    except OSError as exc:
        raise CopyError(f"Cannot list {source_path}: {exc}", path=source_path) from exc
    plan = []
    for name in names:
        target = dest_root / target_name(name, prefix)
        plan.append(CopyPlanEntry(
            source_entry_path=source_path / name,
            target_entry_path=target,
            conflicts=os.path.lexists(target),
        ))
    return plan


def copy_entry(source: Path, target: Path) -> None:
    """Recursively copy source onto target, overwriting what is already there.

    Directories are merged file by file. When the existing target is of a
    different kind (file versus directory), or is a symlink, it is removed first.
    """
    if target.is_symlink():
        target.unlink()
    if source.is_dir():
        if os.path.lexists(target) and not target.is_dir():
            target.unlink()
        shutil.copytree(source, target, dirs_exist_ok=True)
    else:
        if target.is_dir():
            shutil.rmtree(target)
        shutil.copy2(source, target)


def install(source_path, dest_root, *, should_overwrite, prefix=None,
            copy_entry=copy_entry, on_outcome=None) -> InstallSummary:
    """Copy every immediate child of source_path into dest_root.

    Args:
        source_path: Resolved template package directory.
        dest_root: Destination templates root; created when missing.
        should_overwrite: Callable(target_name) -> bool, asked for each conflict.
        prefix: Optional prefix; targets are named "<prefix>-<name>".
        copy_entry: Callable(source, target) performing the recursive copy.
        on_outcome: Optional Callable(status, target_name) called after each entry.

    Returns:
        InstallSummary with added and skipped names in processing order.

    Raises:
        CopyError: If creating dest_root, listing the source, or copying fails.
            Entries copied before the failure are left in place.
    """
    dest_root = Path(dest_root)
    try:
        dest_root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CopyError(f"Cannot create {dest_root}: {exc}", path=dest_root) from exc

    summary = InstallSummary()
    for entry in plan_install(source_path, dest_root, prefix=prefix):
        name = entry.target_name
        if entry.conflicts and not should_overwrite(name):
            logger.debug("Skipping %s", entry.target_entry_path)
            status = SKIPPED
        else:
            logger.debug("Copying %s -> %s", entry.source_entry_path, entry.target_entry_path)
            try:
                copy_entry(entry.source_entry_path, entry.target_entry_path)
            except OSError as exc:
                raise CopyError(
                    f"Cannot copy {entry.source_entry_path} to {entry.target_entry_path}: {exc}",
                    path=entry.source_entry_path,
                ) from exc
            status = ADDED
        summary.record(status, name)
        if on_outcome is not None:
            on_outcome(status, name)
    return summary
