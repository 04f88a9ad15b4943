import pytest

from coolgen.symtab import Symbol, SymbolKind, SymbolNotFoundError, SymbolTable


def test_lookup_in_initial_scope():
    table = SymbolTable()
    sym = Symbol(SymbolKind.FIELD, 12)
    table.add_symbol("x", sym)
    assert table.symbol("x") == sym


def test_missing_symbol_raises():
    table = SymbolTable()
    with pytest.raises(SymbolNotFoundError) as info:
        table.symbol("nope")
    assert info.value.name == "nope"


def test_inner_scope_shadows_outer():
    table = SymbolTable()
    outer = Symbol(SymbolKind.FIELD, 12)
    inner = Symbol(SymbolKind.LOCAL, 4)
    table.add_symbol("x", outer)
    table.push_scope()
    table.add_symbol("x", inner)
    assert table.symbol("x") == inner
    table.pop_scope()
    assert table.symbol("x") == outer


def test_outer_symbol_visible_from_inner_scope():
    table = SymbolTable()
    outer = Symbol(SymbolKind.FIELD, 16)
    table.add_symbol("a", outer)
    table.push_scope()
    assert table.symbol("a") == outer


def test_pop_scope_removes_bindings():
    table = SymbolTable()
    table.push_scope()
    table.add_symbol("y", Symbol(SymbolKind.LOCAL, 8))
    table.pop_scope()
    with pytest.raises(SymbolNotFoundError):
        table.symbol("y")


def test_add_keeps_first_binding_in_same_scope():
    table = SymbolTable()
    first = Symbol(SymbolKind.LOCAL, 4)
    table.add_symbol("z", first)
    table.add_symbol("z", Symbol(SymbolKind.LOCAL, 8))
    assert table.symbol("z") == first


def test_scope_context_manager_closes_on_exit():
    table = SymbolTable()
    with table.scope() as inner:
        inner.add_symbol("p", Symbol(SymbolKind.LOCAL, 4))
        assert table.symbol("p").offset == 4
    with pytest.raises(SymbolNotFoundError):
        table.symbol("p")


def test_scope_context_manager_closes_on_error():
    table = SymbolTable()
    with pytest.raises(RuntimeError):
        with table.scope():
            table.add_symbol("q", Symbol(SymbolKind.LOCAL, 4))
            raise RuntimeError("boom")
    with pytest.raises(SymbolNotFoundError):
        table.symbol("q")


def test_pop_empty_table_raises():
    table = SymbolTable()
    table.pop_scope()
    with pytest.raises(IndexError):
        table.pop_scope()


def test_symbol_is_immutable():
    sym = Symbol(SymbolKind.FIELD, 12)
    with pytest.raises(AttributeError):
        sym.offset = 0
    assert sym.kind is SymbolKind.FIELD