"""Tests for the rendered usage text."""

import pytest

from hygen_add.usage import render_usage


@pytest.mark.unit
class TestRenderUsage:

    def test_mentions_search_roots_and_destination(self, settings):
        text = render_usage(settings)
        assert str(settings.local_modules_root) in text
        assert str(settings.global_modules_root) in text
        assert str(settings.dest_root) in text

    def test_example_lists_candidates_in_order(self, settings):
        text = render_usage(settings, example="cra")
        literal = text.index(str(settings.cwd / "cra") + "\n")
        local = text.index(str(settings.local_modules_root / "hygen-cra" / "_templates"))
        global_ = text.index(str(settings.global_modules_root / "hygen-cra" / "_templates"))
        assert literal < local < global_
