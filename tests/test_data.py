from dataclasses import dataclass

import pytest

from coolgen.data import Data


@dataclass
class _Klass:
    name: str


class _Data(Data):
    def __init__(self):
        super().__init__()
        self.calls = []

    def _make_string_const(self, value):
        self.calls.append(("str", value))
        return f"str:{value}"

    def _make_bool_const(self, value):
        self.calls.append(("bool", value))
        return f"bool:{value}"

    def _make_int_const(self, value):
        self.calls.append(("int", value))
        return f"int:{value}"

    def _make_class_struct(self, klass):
        self.calls.append(("struct", klass.name))
        return f"{klass.name}_protObj"

    def _make_class_disp_tab(self, klass):
        self.calls.append(("disp", klass.name))
        return f"{klass.name}_dispTab"

    def _gen_class_obj_tab(self):
        self.calls.append(("objtab",))

    def _gen_class_name_tab(self):
        self.calls.append(("nametab",))

    def _emit_inner(self, out_file):
        self.calls.append(("emit", out_file))


def test_string_const_created_once():
    data = _Data()
    first = Data.string_const(data, "hello")
    second = Data.string_const(data, "hello")
    assert first == second
    assert data.calls.count(("str", "hello")) == 1


def test_distinct_strings_get_distinct_handles():
    data = _Data()
    assert Data.string_const(data, "a") != Data.string_const(data, "b")


def test_int_const_cached():
    data = _Data()
    handle = Data.int_const(data, 42)
    assert Data.int_const(data, 42) == handle
    assert data.calls == [("int", 42)]


def test_bool_const_cached_per_value():
    data = _Data()
    t = Data.bool_const(data, True)
    f = Data.bool_const(data, False)
    assert t != f
    assert Data.bool_const(data, True) == t
    assert len(data.calls) == 2


def test_class_struct_keyed_by_name():
    data = _Data()
    first = Data.class_struct(data, _Klass("Main"))
    second = Data.class_struct(data, _Klass("Main"))
    assert first == second
    assert data.calls == [("struct", "Main")]


def test_class_disp_tab_keyed_by_name():
    data = _Data()
    handle = Data.class_disp_tab(data, _Klass("Foo"))
    assert Data.class_disp_tab(data, _Klass("Foo")) == handle
    assert data.calls == [("disp", "Foo")]


def test_struct_and_disp_tab_are_separate_caches():
    data = _Data()
    Data.class_struct(data, _Klass("A"))
    Data.class_disp_tab(data, _Klass("A"))
    assert data.calls == [("struct", "A"), ("disp", "A")]


def test_emit_order():
    data = _Data()
    Data.emit(data, "out.s")
    assert data.calls == [("objtab",), ("nametab",), ("emit", "out.s")]


def test_init_values_for_basic_types():
    data = _Data()
    assert Data._init_value(data, "String") == Data.string_const(data, "")
    assert Data._init_value(data, "Int") == Data.int_const(data, 0)
    assert Data._init_value(data, "Bool") == Data.bool_const(data, False)


def test_init_value_for_other_type_raises():
    data = _Data()
    with pytest.raises(ValueError):
        Data._init_value(data, "Main")


def test_data_is_abstract():
    with pytest.raises(TypeError):
        Data()