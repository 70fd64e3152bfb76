"""Unit tests for the alias service."""

import io

import pytest
from rich.console import Console

from pseudonyms import api
from pseudonyms.api import API_NAMESPACE, LOOKUP_API, PseudonymService
from pseudonyms.config import PseudonymsConfig
from pseudonyms.errors import AlreadyBoundError
from pseudonyms.namespaces import CanonicalIdentifier, NamespaceCatalog, Visibility
from pseudonyms.reader import DispatchTable, ReaderContext, ReaderHook
from pseudonyms.registry import AliasRegistry


@pytest.fixture
def service():
    catalog = NamespaceCatalog()
    catalog.define_namespace("pkg.math", exports=["add"], internals=["helper"])
    return PseudonymService(
        registry=AliasRegistry(),
        catalog=catalog,
        table=DispatchTable(),
        context=ReaderContext("app"),
    )


class TestDefaultScope:
    def test_add_alias_uses_current_namespace(self, service):
        assert service.add_alias("pkg.math", "m") == "m => pkg.math"
        assert service.registry.lookup_by_alias("app", "m") == "pkg.math"
        assert service.find_namespace("m") == "pkg.math"
        assert service.find_alias("pkg.math") == "m"

    def test_explicit_scope(self, service):
        service.add_alias("pkg.math", "m", scope="other")
        assert service.find_namespace("m") is None
        assert service.find_namespace("m", scope="other") == "pkg.math"
        assert service.list_aliases("other") == [("m", "pkg.math")]

    def test_remove_alias(self, service):
        service.add_alias("pkg.math", "m")
        assert service.remove_alias("m") == "m"
        assert service.remove_alias("m") == "m"
        assert service.list_aliases() == []

    def test_print_aliases(self, service):
        service.add_alias("pkg.math", "m")
        console = Console(file=io.StringIO(), width=120, color_system=None)
        assert service.print_aliases(console=console) == 1
        assert "pkg.math => m" in console.file.getvalue()


class TestEnable:
    def test_marker_inactive_until_enabled(self, service):
        service.add_alias("pkg.math", "m")
        assert service.read("$m:add") == ["$m:add"]

    def test_enable_resolves_tokens(self, service):
        service.add_alias("pkg.math", "m")
        service.enable()
        assert service.read("$m:add") == [CanonicalIdentifier("pkg.math", "add")]

    def test_enable_imports_lookup_api(self, service):
        service.enable()
        for name in LOOKUP_API:
            identifier, visibility = service.catalog.resolve("app", name)
            assert identifier == CanonicalIdentifier(API_NAMESPACE, name)
            assert visibility is Visibility.INTERNAL

    def test_enable_is_idempotent(self, service):
        service.add_alias("pkg.math", "m")
        service.enable()
        service.enable()
        assert service.read("$m:add") == [CanonicalIdentifier("pkg.math", "add")]

    def test_enable_with_marker(self, service):
        service.add_alias("pkg.math", "m")
        service.enable(marker="%")
        assert service.read("%m:add $m:add") == [CanonicalIdentifier("pkg.math", "add"), "$m:add"]

    def test_set_marker_rebinds(self, service):
        service.add_alias("pkg.math", "m")
        service.enable()
        service.set_marker("@")

        assert service.marker == "@"
        assert ReaderHook.active_marker == "@"
        assert service.read("@m:add $m:add") == [CanonicalIdentifier("pkg.math", "add"), "$m:add"]

    def test_set_marker_before_enable(self, service):
        service.set_marker("@")
        assert "@" not in service.table
        service.enable()
        assert service.table.get_macro_character("@") is service.resolver

    def test_set_marker_after_other_service_took_marker(self, service):
        service.add_alias("pkg.math", "m")
        service.enable()
        other = PseudonymService(registry=AliasRegistry(), table=DispatchTable())
        other.enable()
        assert "$" not in service.table

        service.set_marker("%")

        assert ReaderHook.active_marker == "%"
        assert ReaderHook.active_table is service.table
        assert service.read("%m:add") == [CanonicalIdentifier("pkg.math", "add")]

    def test_comment_character_marker_rejected(self, service):
        service.add_alias("pkg.math", "m")
        service.enable()
        with pytest.raises(ValueError):
            service.enable(marker=";")
        with pytest.raises(ValueError):
            service.set_marker(";")

        assert service.marker == "$"
        assert service.read("$m:add ; note") == [CanonicalIdentifier("pkg.math", "add")]


class TestFromConfig:
    def test_applies_namespaces_and_aliases(self):
        cfg = PseudonymsConfig(
            current_namespace="app",
            namespaces={"pkg.math": {"exports": ["add"]}},
            aliases={"app": {"m": "pkg.math"}},
        )
        service = PseudonymService.from_config(cfg, registry=AliasRegistry(), table=DispatchTable())
        assert service.read("$m:add") == [CanonicalIdentifier("pkg.math", "add")]

    def test_disabled_in_config(self):
        cfg = PseudonymsConfig(enabled=False, aliases={"user": {"m": "pkg.math"}})
        service = PseudonymService.from_config(cfg, registry=AliasRegistry(), table=DispatchTable())
        assert service.read("$m:add") == ["$m:add"]

    def test_conflicting_config_aliases(self):
        cfg = PseudonymsConfig(aliases={"user": {"m": "pkg.math", "n": "pkg.math"}})
        with pytest.raises(AlreadyBoundError):
            PseudonymService.from_config(cfg, registry=AliasRegistry(), table=DispatchTable())


class TestProcessWideService:
    def test_get_service_is_shared(self):
        assert api.get_service() is api.get_service()

    def test_enable_returns_shared_service(self):
        service = api.enable()
        assert service is api.get_service()
        assert ReaderHook.active_table is service.table

    def test_enable_with_context(self):
        service = api.get_service()
        previous = service.context
        try:
            returned = api.enable(context=ReaderContext("ctx.ns"))

            assert returned is service
            assert service.context.current_namespace == "ctx.ns"
            identifier, visibility = service.catalog.resolve("ctx.ns", "lookup-by-alias")
            assert identifier == CanonicalIdentifier(API_NAMESPACE, "lookup-by-alias")
            assert visibility is Visibility.INTERNAL
        finally:
            service.context = previous
