"""Decide whether an existing generator may be overwritten."""

from typing import Callable

import click

ShouldOverwrite = Callable[[str], bool]


def confirm_overwrite(name: str, *, confirm=click.confirm) -> bool:
    """Ask the operator; pressing enter accepts the overwrite."""
    return confirm(f"      '{name}' already exists. Overwrite?", default=True)


def always_overwrite(_name: str) -> bool:
    return True


def never_overwrite(_name: str) -> bool:
    return False


def choose_policy(assume_yes=False, assume_no=False) -> ShouldOverwrite:  # noqa: FBT002
    """Pick the overwrite policy for the --yes/--no flags.

    Raises click.UsageError if both flags are set.
    """
    if assume_yes and assume_no:
        raise click.UsageError("--yes and --no cannot be combined")
    if assume_yes:
        return always_overwrite
    if assume_no:
        return never_overwrite
    return confirm_overwrite
