"""Shared fixtures for hygen-add tests."""

import pytest

from hygen_add.settings import Settings


@pytest.fixture
def settings(tmp_path):
    """Settings rooted entirely inside tmp_path."""
    cwd = tmp_path / "project"
    cwd.mkdir()
    return Settings(
        cwd=cwd,
        install_dir=tmp_path / "install",
        global_modules_root=tmp_path / "global" / "lib" / "node_modules",
        local_modules_root=cwd / "node_modules",
        dest_root=tmp_path / "install" / "_templates",
    )


@pytest.fixture
def template_package(tmp_path):
    """A foo/_templates package holding a bar/ generator and a baz.txt file."""
    source = tmp_path / "foo" / "_templates"
    (source / "bar" / "new").mkdir(parents=True)
    (source / "bar" / "new" / "hello.ejs.t").write_text("---\nto: hello.txt\n---\nhello\n")
    (source / "baz.txt").write_text("baz from package\n")
    return source
