"""Tests for imp_core.environment."""

import pytest

from imp_core import ImpReferenceError, ImpTypeError, Scope, VBool, VNumber


class TestDeclareAssign:
    def test_declare_roundtrip(self):
        scope = Scope()
        scope.declare("x", VNumber(10))
        assert scope.lookup("x") == VNumber(10)

    def test_declare_overwrites(self):
        scope = Scope()
        scope.declare("x", VNumber(1))
        scope.declare("x", VBool(True))
        assert scope.lookup("x") == VBool(True)
        assert len(scope) == 1

    def test_assign_existing(self):
        scope = Scope({"x": VNumber(1)})
        scope.assign("x", VNumber(2))
        assert scope["x"] == VNumber(2)

    def test_assign_undeclared_raises(self):
        scope = Scope()
        with pytest.raises(ImpReferenceError) as info:
            scope.assign("y", VNumber(2))
        assert info.value.name == "y"
        assert "y" not in scope


class TestLookup:
    def test_unbound_raises(self):
        with pytest.raises(ImpReferenceError, match="nope is not defined"):
            Scope().lookup("nope")

    def test_lookup_does_not_consult_own_parent(self):
        # Only a *bound* nested scope delegates to its parent.
        parent = Scope({"x": VNumber(1)})
        child = Scope({}, parent)
        with pytest.raises(ImpReferenceError):
            child.lookup("x")


class TestParentLink:
    def test_nested_scope_own_binding_wins(self):
        parent = Scope({"x": VNumber(1)})
        nested = Scope({"x": VNumber(2)}, parent)
        top = Scope({"x": nested})
        assert top.lookup("x") == VNumber(2)

    def test_nested_scope_delegates_to_parent(self):
        parent = Scope({"x": VNumber(7)})
        nested = Scope({"y": VNumber(2)}, parent)
        top = Scope({"x": nested})
        assert top.lookup("x") == VNumber(7)

    def test_nested_scope_missing_everywhere(self):
        parent = Scope({"a": VNumber(7)})
        nested = Scope({"b": VNumber(2)}, parent)
        top = Scope({"x": nested})
        with pytest.raises(ImpReferenceError):
            top.lookup("x")

    def test_chained_nested_scopes(self):
        grandparent = Scope({"x": VBool(True)})
        inner = Scope({}, grandparent)
        parent = Scope({"x": inner})
        nested = Scope({}, parent)
        top = Scope({"x": nested})
        assert top.lookup("x") == VBool(True)

    def test_nested_scope_without_parent_is_not_a_value(self):
        top = Scope({"x": Scope({"x": VNumber(1)})})
        with pytest.raises(ImpTypeError):
            top.lookup("x")

    def test_merged_view_leaves_originals_untouched(self):
        parent = Scope({"x": VNumber(1), "y": VNumber(1)})
        nested = Scope({"x": VNumber(2)}, parent)
        view = nested.merged_view()
        assert view.bindings == {"x": VNumber(2), "y": VNumber(1)}
        assert parent.bindings == {"x": VNumber(1), "y": VNumber(1)}
        assert nested.bindings == {"x": VNumber(2)}


class TestMappingConveniences:
    def test_contains_iter_len(self):
        scope = Scope({"a": VNumber(1), "b": VBool(False)})
        assert "a" in scope
        assert "c" not in scope
        assert list(scope) == ["a", "b"]
        assert len(scope) == 2

    def test_to_python(self):
        nested = Scope({"z": VNumber(3)})
        scope = Scope({"a": VNumber(1), "b": VBool(False), "n": nested})
        assert scope.to_python() == {"a": 1, "b": False, "n": {"z": 3}}
