"""Click command for the hygen-add CLI."""

import logging
import sys

import click

from hygen_add.errors import CopyError, ResolutionError
from hygen_add.installer import ADDED, install
from hygen_add.overwrite_policy import choose_policy
from hygen_add.package_spec import PackageSpec
from hygen_add.resolver import require, resolve
from hygen_add.settings import load_settings
from hygen_add.usage import render_usage

LOG_FORMAT = "[%(levelname)s] %(message)s"

logger = logging.getLogger(__name__)


def _setup_logging(verbose):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def _report(status, name):
    if status == ADDED:
        click.secho(f"   added: {name}", fg="green")
    else:
        click.secho(f" skipped: {name}", fg="yellow")


@click.command("hygen-add")
@click.argument("identifier", required=False)
@click.option("--name", "explicit_name", default=None, help="Display name for the package.")
@click.option("--prefix", default=None, help="Prefix added generators, avoids clashing names.")
@click.option("--exact", is_flag=True, default=False, help="Look for PACKAGE instead of hygen-PACKAGE.")
@click.option("--yes", "-y", "assume_yes", is_flag=True, default=False,
              help="Overwrite existing generators without asking.")
@click.option("--no", "-n", "assume_no", is_flag=True, default=False,
              help="Keep existing generators without asking.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log resolution and copy details.")
def main(identifier, explicit_name, prefix, exact, assume_yes, assume_no, verbose):  # noqa: FBT001
    """Copy the generators of a template PATH or PACKAGE into the templates root."""
    _setup_logging(verbose)
    settings = load_settings()

    if not identifier:
        click.echo(render_usage(settings))
        sys.exit(1)

    should_overwrite = choose_policy(assume_yes, assume_no)

    spec = PackageSpec(identifier, exact=exact, prefix=prefix, explicit_name=explicit_name)
    try:
        found = require(resolve(spec, settings))
    except ResolutionError as exc:
        for path in exc.searched:
            logger.debug("Not found: %s", path)
        click.echo(str(exc))
        sys.exit(1)

    click.echo(f"Adding: {spec.display_name}")
    try:
        install(
            found.source_path,
            settings.dest_root,
            prefix=spec.prefix,
            should_overwrite=should_overwrite,
            on_outcome=_report,
        )
    except CopyError as exc:
        exc.package = spec.display_name
        click.secho(f"\n\nCan't add {exc.package}\n\n", fg="red", err=True)
        click.echo(f"{exc}", err=True)
        sys.exit(1)
