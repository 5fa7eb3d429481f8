"""Tests for canonical package naming."""

import pytest

from hygen_add.package_spec import PackageSpec, canonical_name


@pytest.mark.unit
class TestCanonicalName:

    @pytest.mark.parametrize("identifier", ["cra", "react", "@scope/thing", "hygen-cra"])
    def test_exact_is_identifier_verbatim(self, identifier):
        assert canonical_name(identifier, exact=True) == identifier

    @pytest.mark.parametrize("identifier", ["cra", "react", "@scope/thing", "hygen-cra"])
    def test_non_exact_adds_hygen_prefix(self, identifier):
        assert canonical_name(identifier, exact=False) == "hygen-" + identifier

    def test_default_is_not_exact(self):
        assert canonical_name("cra") == "hygen-cra"


@pytest.mark.unit
class TestPackageSpec:

    def test_module_name_follows_exact_flag(self):
        assert PackageSpec("canvas").module_name == "hygen-canvas"
        assert PackageSpec("canvas", exact=True).module_name == "canvas"

    def test_display_name_defaults_to_module_name(self):
        assert PackageSpec("cra").display_name == "hygen-cra"

    def test_explicit_name_overrides_display_name_only(self):
        spec = PackageSpec("cra", explicit_name="my-templates")
        assert spec.display_name == "my-templates"
        assert spec.module_name == "hygen-cra"

    def test_is_immutable(self):
        spec = PackageSpec("cra")
        with pytest.raises(AttributeError):
            spec.identifier = "other"
