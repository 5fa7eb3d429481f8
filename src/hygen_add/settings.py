"""Environment-derived settings, captured once at startup."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_GLOBAL_MODULES_ROOT = "~/.npm-global/lib/node_modules"
DEFAULT_TEMPLATES_DIR = "_templates"

_INSTALL_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True)
class Settings:
    """Filesystem roots used by the resolver and installer."""

    cwd: Path
    install_dir: Path
    global_modules_root: Path
    local_modules_root: Path
    dest_root: Path


def load_settings(environ=None, cwd=None, install_dir=None) -> Settings:
    """Read NPM_CONFIG_PREFIX and HYGEN_TMPLS and build a Settings value.

    Args:
        environ: Mapping to read variables from (defaults to os.environ).
        cwd: Working directory for relative candidates (defaults to Path.cwd()).
        install_dir: Program installation directory (defaults to this package).

    Returns:
        Settings with every path expanded and made absolute where possible.
    """
    if environ is None:
        environ = os.environ
    cwd = Path(cwd) if cwd is not None else Path.cwd()
    install_dir = Path(install_dir) if install_dir is not None else _INSTALL_DIR

    global_root = environ.get("NPM_CONFIG_PREFIX") or DEFAULT_GLOBAL_MODULES_ROOT
    templates_dir = environ.get("HYGEN_TMPLS") or DEFAULT_TEMPLATES_DIR

    return Settings(
        cwd=cwd,
        install_dir=install_dir,
        global_modules_root=Path(global_root).expanduser(),
        local_modules_root=cwd / "node_modules",
        dest_root=install_dir / Path(templates_dir).expanduser(),
    )
