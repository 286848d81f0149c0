import pytest

from doxymark.config import Config, DoxybookError
from doxymark.doxygen import Doxygen, IndexNode, read_index_kinds
from doxymark.enums import Kind, Type


def _write_index(tmp_path, body):
    (tmp_path / "index.xml").write_text(
        f'<?xml version="1.0"?>\n<doxygenindex>{body}</doxygenindex>', encoding="utf-8"
    )


def test_read_index_kinds_keeps_order_and_duplicates(tmp_path):
    _write_index(
        tmp_path,
        '<compound kind="class" refid="classA"><name>A</name></compound>'
        '<compound kind="group" refid="group__g"/>'
        '<compound kind="class" refid="classB"/>',
    )
    assert read_index_kinds(tmp_path) == [
        ("class", "classA"),
        ("group", "group__g"),
        ("class", "classB"),
    ]


def test_read_index_kinds_skips_compound_without_refid(tmp_path):
    _write_index(tmp_path, '<compound kind="class"/><compound kind="page" refid="intro"/>')
    assert read_index_kinds(tmp_path) == [("page", "intro")]


def test_read_index_kinds_wrong_root(tmp_path):
    (tmp_path / "index.xml").write_text("<other><compound kind='a' refid='b'/></other>")
    with pytest.raises(DoxybookError, match="root element"):
        read_index_kinds(tmp_path)


def test_read_index_kinds_no_compound(tmp_path):
    _write_index(tmp_path, "")
    with pytest.raises(DoxybookError, match="No <compound>"):
        read_index_kinds(tmp_path)


def test_read_index_kinds_missing_file(tmp_path):
    with pytest.raises(DoxybookError):
        read_index_kinds(tmp_path)


def test_read_index_kinds_malformed(tmp_path):
    (tmp_path / "index.xml").write_text("<doxygenindex><compound")
    with pytest.raises(DoxybookError):
        read_index_kinds(tmp_path)


def test_add_sets_parent_and_find():
    doxygen = Doxygen(Config())
    node = IndexNode("classA", Kind.CLASS, name="A")
    doxygen.add(node)
    assert node.parent is doxygen.index
    assert doxygen.index.children == [node]
    assert doxygen.find("classA") is node


def test_find_missing_raises():
    with pytest.raises(DoxybookError, match="classMissing"):
        Doxygen(Config()).find("classMissing")


def test_add_same_refid_keeps_first():
    doxygen = Doxygen(Config())
    first = IndexNode("classA", Kind.CLASS)
    second = IndexNode("classA", Kind.STRUCT)
    doxygen.add(first)
    assert doxygen.add(second) is first
    assert doxygen.index.children == [first]


def test_reparented_node_is_pruned_from_index():
    doxygen = Doxygen(Config())
    member = IndexNode("classA", Kind.CLASS)
    doxygen.add(member)
    group = IndexNode("group__g", Kind.MODULE, children=[member])
    member.parent = group
    doxygen.add(group)
    assert doxygen.index.children == [group]
    assert doxygen.find("classA") is member


def test_node_with_foreign_parent_is_cached_but_not_listed():
    doxygen = Doxygen(Config())
    outer = IndexNode("namespaceN", Kind.NAMESPACE)
    inner = IndexNode("classN_1_1A", Kind.CLASS, parent=outer)
    doxygen.add(inner)
    assert doxygen.index.children == []
    assert doxygen.find("classN_1_1A") is inner


def test_main_page_is_renamed():
    config = Config()
    config.main_page_name = "mainpage"
    doxygen = Doxygen(config)
    page = IndexNode("indexpage", Kind.PAGE)
    doxygen.add(page)
    assert page.refid == "mainpage"
    assert doxygen.find("mainpage") is page


def test_rebuild_cache_finds_late_descendants():
    doxygen = Doxygen(Config())
    ns = IndexNode("namespaceN", Kind.NAMESPACE)
    doxygen.add(ns)
    child = IndexNode("classN_1_1B", Kind.CLASS, parent=ns)
    ns.children.append(child)
    with pytest.raises(DoxybookError):
        doxygen.find("classN_1_1B")
    doxygen.rebuild_cache()
    assert doxygen.find("classN_1_1B") is child


def test_update_group_pointers_nested():
    doxygen = Doxygen(Config())
    outer = IndexNode("group__outer", Kind.MODULE)
    inner = IndexNode("group__inner", Kind.MODULE, parent=outer)
    cls = IndexNode("classC", Kind.CLASS, parent=inner)
    func = IndexNode("func", Kind.FUNCTION, parent=outer)
    inner.children.append(cls)
    outer.children.extend([inner, func])
    doxygen.add(outer)
    doxygen.update_group_pointers(doxygen.index)
    assert inner.group is outer
    assert func.group is outer
    assert cls.group is inner
    assert outer.group is None


def test_node_type_follows_kind():
    assert IndexNode("s", Kind.STRUCT).type is Type.CLASSES
    assert IndexNode("index").type is Type.NONE