"""Unit tests for marker binding."""

import pytest
from pseudonyms.namespaces import NamespaceCatalog
from pseudonyms.reader import DispatchTable, PseudonymResolver, ReaderHook
from pseudonyms.registry import AliasRegistry


class TestReaderHook:
    def setup_method(self):
        self.resolver = PseudonymResolver(AliasRegistry(), NamespaceCatalog())
        self.hook = ReaderHook(self.resolver)
        self.table = DispatchTable()

    def test_install_binds_marker(self):
        self.hook.install(self.table, "$")
        assert self.table.get_macro_character("$") is self.resolver
        assert ReaderHook.active_marker == "$"
        assert ReaderHook.active_table is self.table

    def test_changing_marker_unbinds_previous(self):
        self.hook.install(self.table, "$")
        self.hook.install(self.table, "%")

        assert "$" not in self.table
        assert self.table.get_macro_character("%") is self.resolver
        assert ReaderHook.active_marker == "%"

    def test_reinstall_same_marker_keeps_binding(self):
        self.hook.install(self.table, "$")
        self.hook.install(self.table, "$")
        assert self.table.get_macro_character("$") is self.resolver

    def test_only_one_marker_per_process(self):
        other_table = DispatchTable()
        other_hook = ReaderHook(PseudonymResolver(AliasRegistry(), NamespaceCatalog()))

        self.hook.install(self.table, "$")
        other_hook.install(other_table, "$")

        assert "$" not in self.table
        assert "$" in other_table

    def test_marker_equal_to_separator_rejected(self):
        self.hook.install(self.table, "$")
        with pytest.raises(ValueError):
            self.hook.install(self.table, ":")
        assert self.table.get_macro_character("$") is self.resolver

    def test_invalid_marker_keeps_previous_binding(self):
        self.hook.install(self.table, "$")
        with pytest.raises(ValueError):
            self.hook.install(self.table, "  ")
        assert ReaderHook.active_marker == "$"
        assert "$" in self.table

    def test_comment_character_rejected_as_marker(self):
        """A ';' marker would be swallowed as a comment before dispatch."""
        self.hook.install(self.table, "$")
        with pytest.raises(ValueError):
            self.hook.install(self.table, ";")

        assert ";" not in self.table
        assert ReaderHook.active_marker == "$"
        assert self.table.get_macro_character("$") is self.resolver
