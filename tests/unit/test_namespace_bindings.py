#!/usr/bin/env python3
"""
Tests for the per-unit namespace binding table and synthetic name counter.
"""

import pytest

from googmodule.passes.namespace_bindings import NamespaceBindingTable, SyntheticNameCounter
from googmodule.shared.errors import GoogModuleImplementationError
from googmodule.shared.nodes import Identifier


class TestSyntheticNameCounter:

    def test_names_start_at_one_and_increase(self):
        counter = SyntheticNameCounter()
        assert counter.next_name() == "googmodule_1_"
        assert counter.next_name() == "googmodule_2_"
        assert counter.next_name() == "googmodule_3_"

    def test_next_identifier(self):
        ident = SyntheticNameCounter().next_identifier()
        assert isinstance(ident, Identifier)
        assert ident.name == "googmodule_1_"

    def test_counters_are_independent(self):
        first, second = SyntheticNameCounter(), SyntheticNameCounter()
        first.next_name()
        assert second.next_name() == "googmodule_1_"


class TestNamespaceBindingTable:

    def test_lookup_missing(self):
        assert NamespaceBindingTable().lookup("a.b") is None

    def test_bind_then_lookup(self):
        table = NamespaceBindingTable()
        ident = Identifier("x_1")
        table.bind("a.b", ident)
        assert table.lookup("a.b") is ident
        assert "a.b" in table
        assert len(table) == 1

    def test_rebind_rejected(self):
        table = NamespaceBindingTable()
        table.bind("a.b", Identifier("x_1"))
        with pytest.raises(GoogModuleImplementationError):
            table.bind("a.b", Identifier("y_1"))
        assert table.lookup("a.b").name == "x_1"
