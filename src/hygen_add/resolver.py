"""Locate a template package on disk.

Candidates are checked in a fixed order and the first existing directory
wins. A literal PATH is always checked before a PACKAGE, so a directory named
like a module shadows the module.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from hygen_add.errors import ResolutionError
from hygen_add.package_spec import PackageSpec
from hygen_add.settings import Settings

logger = logging.getLogger(__name__)

TEMPLATES_DIR = "_templates"


@dataclass(frozen=True)
class Found:
    canonical_name: str
    source_path: Path
    candidate: str


@dataclass(frozen=True)
class NotFound:
    identifier: str
    canonical_name: str
    searched: tuple[Path, ...]


def _literal_path(spec, settings):
    return settings.cwd / Path(spec.identifier).expanduser()


def _cwd_templates(spec, settings):
    return settings.cwd / spec.identifier / TEMPLATES_DIR


def _install_dir_path(spec, settings):
    return settings.install_dir / spec.identifier


def _install_dir_templates(spec, settings):
    return settings.install_dir / spec.identifier / TEMPLATES_DIR


def _local_module(spec, settings):
    return settings.local_modules_root / spec.module_name / TEMPLATES_DIR


def _global_module(spec, settings):
    return settings.global_modules_root / spec.module_name / TEMPLATES_DIR


CANDIDATES: tuple[tuple[str, Callable[[PackageSpec, Settings], Path]], ...] = (
    ("path", _literal_path),
    ("path/_templates", _cwd_templates),
    ("install-dir", _install_dir_path),
    ("install-dir/_templates", _install_dir_templates),
    ("local-module", _local_module),
    ("global-module", _global_module),
)


def candidate_paths(spec: PackageSpec, settings: Settings) -> list[tuple[str, Path]]:
    """Return every candidate (label, path) in search order."""
    return [(label, build(spec, settings)) for label, build in CANDIDATES]


def resolve(spec: PackageSpec, settings: Settings, *, is_dir=os.path.isdir) -> Found | NotFound:
    """Find the first candidate directory that exists.

    Builders are evaluated lazily: once a candidate matches, later paths are
    neither built nor checked.

    Args:
        spec: The package request.
        settings: Filesystem roots to search.
        is_dir: Existence predicate, injectable for tests.

    Returns:
        Found with the matching path, or NotFound listing the paths searched.
    """
    searched = []
    for label, build in CANDIDATES:
        path = build(spec, settings)
        searched.append(path)
        logger.debug("Checking %s candidate: %s", label, path)
        if is_dir(path):
            logger.info("Resolved %s to %s (%s)", spec.identifier, path, label)
            return Found(canonical_name=spec.module_name, source_path=path, candidate=label)
    return NotFound(
        identifier=spec.identifier,
        canonical_name=spec.module_name,
        searched=tuple(searched),
    )


def require(result: Found | NotFound) -> Found:
    """Return a Found result or raise ResolutionError for NotFound."""
    if isinstance(result, NotFound):
        raise ResolutionError(result.identifier, result.searched)
    return result
