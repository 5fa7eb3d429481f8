"""Render the usage text shown when no package is given."""

from pathlib import Path

import jinja2

from hygen_add.package_spec import PackageSpec
from hygen_add.resolver import candidate_paths

_TEMPLATES_DIR = Path(__file__).parent / "templates"

_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(_TEMPLATES_DIR),
    trim_blocks=True,
    keep_trailing_newline=True,
)


def render_usage(settings, *, example="cra") -> str:
    """Render usage.j2 with the effective search roots and destination."""
    template = _ENV.get_template("usage.j2")
    return template.render(
        local_modules_root=settings.local_modules_root,
        global_modules_root=settings.global_modules_root,
        dest_root=settings.dest_root,
        example=example,
        candidates=candidate_paths(PackageSpec(example), settings),
    )
