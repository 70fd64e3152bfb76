"""Integration test for registering aliases and reading aliased source."""

import pytest
from pseudonyms.api import PseudonymService
from pseudonyms.config import PseudonymsConfig
from pseudonyms.errors import UnknownPseudonymError, VisibilityError
from pseudonyms.namespaces import CanonicalIdentifier
from pseudonyms.reader import DispatchTable
from pseudonyms.registry import AliasRegistry


class TestEndToEnd:
    def test_config_to_resolved_forms(self, tmp_path):
        """Load a config, register more aliases at runtime and read a program."""
        config_file = tmp_path / "pseudonyms.yaml"
        config_file.write_text("""
current_namespace: app.main
namespaces:
  pkg.math:
    exports: [add, mul]
    internals: [cache]
  pkg.strings:
    exports: [join]
aliases:
  app.main:
    m: pkg.math
""")
        cfg = PseudonymsConfig.load_from_file(config_file)
        service = PseudonymService.from_config(cfg, registry=AliasRegistry(), table=DispatchTable())
        service.add_alias("pkg.strings", "str")

        program = """
; aliased references
(define (area w h) ($m:mul w h))
($str:join ($m::cache) sep)
"""
        forms = service.read(program)

        mul = CanonicalIdentifier("pkg.math", "mul")
        assert forms[0] == ["define", ["area", "w", "h"], [mul, "w", "h"]]
        assert forms[1][0] == CanonicalIdentifier("pkg.strings", "join")
        assert forms[1][1] == [CanonicalIdentifier("pkg.math", "cache")]

    def test_rebinding_changes_resolution(self):
        cfg = PseudonymsConfig(
            namespaces={"pkg.math": {"exports": ["add"]}, "pkg.vector": {"exports": ["add"]}},
            aliases={"user": {"m": "pkg.math"}},
        )
        service = PseudonymService.from_config(cfg, registry=AliasRegistry(), table=DispatchTable())
        assert service.read("$m:add") == [CanonicalIdentifier("pkg.math", "add")]

        service.remove_alias("m")
        with pytest.raises(UnknownPseudonymError):
            service.read("$m:add")

        service.add_alias("pkg.vector", "m")
        assert service.read("$m:add") == [CanonicalIdentifier("pkg.vector", "add")]

    def test_export_after_failure(self):
        cfg = PseudonymsConfig(
            namespaces={"pkg.math": {"internals": ["add"]}},
            aliases={"user": {"m": "pkg.math"}},
        )
        service = PseudonymService.from_config(cfg, registry=AliasRegistry(), table=DispatchTable())
        with pytest.raises(VisibilityError):
            service.read("$m:add")

        service.catalog.export("pkg.math", "add")
        assert service.read("$m:add") == [CanonicalIdentifier("pkg.math", "add")]
