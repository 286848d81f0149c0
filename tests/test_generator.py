import json

import pytest

from doxymark.config import Config, DoxybookError
from doxymark.doxygen import Doxygen, IndexNode
from doxymark.enums import FolderCategory, Kind
from doxymark.generator import Generator, SummarySection


def _tree(config):
    doxygen = Doxygen(config)
    ns = IndexNode("namespaceEngine", Kind.NAMESPACE, name="Engine", url="ns/Engine")
    cls = IndexNode("classEngine_1_1Foo", Kind.CLASS, name="Engine::Foo", url="cls/Foo", parent=ns)
    ns.children.append(cls)
    doxygen.add(ns)
    group = IndexNode("group__audio", Kind.MODULE, name="audio", title="Audio", url="grp/audio")
    doxygen.add(group)
    doxygen.add(IndexNode("indexpage", Kind.PAGE, name="Main"))
    doxygen.add(IndexNode("intro", Kind.PAGE, name="Introduction", url="pg/intro"))
    doxygen.add(IndexNode("Engine_8hpp", Kind.FILE, name="Engine.hpp", url="f/hpp"))
    doxygen.add(IndexNode("main_8cpp", Kind.FILE, name="main.cpp", url="f/cpp"))
    return doxygen


@pytest.mark.parametrize(
    ("kind", "attribute"),
    [
        (Kind.STRUCT, "template_kind_struct"),
        (Kind.INTERFACE, "template_kind_interface"),
        (Kind.UNION, "template_kind_union"),
        (Kind.CLASS, "template_kind_class"),
        (Kind.NAMESPACE, "template_kind_namespace"),
        (Kind.MODULE, "template_kind_group"),
        (Kind.DIR, "template_kind_dir"),
        (Kind.FILE, "template_kind_file"),
        (Kind.PAGE, "template_kind_page"),
        (Kind.EXAMPLE, "template_kind_example"),
    ],
)
def test_kind_to_template_name(kind, attribute):
    config = Config()
    setattr(config, attribute, f"custom_{attribute}")
    generator = Generator(config, Doxygen(config))
    assert generator.kind_to_template_name(kind) == f"custom_{attribute}"


def test_kind_to_template_name_unknown():
    config = Config()
    with pytest.raises(DoxybookError):
        Generator(config, Doxygen(config)).kind_to_template_name(Kind.FUNCTION)


def test_should_include_files_filter():
    config = Config()
    generator = Generator(config, Doxygen(config))
    cpp = IndexNode("main_8cpp", Kind.FILE, name="main.cpp")
    assert generator.should_include(cpp) is True
    config.files_filter = [".hpp"]
    assert generator.should_include(cpp) is False
    assert generator.should_include(IndexNode("e", Kind.FILE, name="Engine.hpp")) is True
    assert generator.should_include(IndexNode("c", Kind.CLASS, name="main.cpp")) is True


def test_summary_fills_placeholder(tmp_path):
    config = Config()
    generator = Generator(config, _tree(config))
    source = tmp_path / "SUMMARY.tmpl"
    source.write_text("# Summary\n\n  {{doxygen}}\nend\n", encoding="utf-8")
    target = tmp_path / "SUMMARY.md"
    sections = [
        SummarySection(
            FolderCategory.CLASSES,
            frozenset({Kind.NAMESPACE, Kind.CLASS}),
            frozenset({Kind.NAMESPACE}),
        ),
        SummarySection(FolderCategory.PAGES, frozenset({Kind.PAGE})),
    ]
    generator.summary(source, target, sections)

    classes = config.index_classes_title
    pages = config.index_related_pages_title
    expected = (
        "# Summary\n\n"
        f"  * [{classes}]({config.index_classes_name}.{config.file_ext})\n"
        f"    * [Engine::Foo]({classes}/classEngine_1_1Foo.md)\n"
        f"  * [{pages}]({config.index_related_pages_name}.{config.file_ext})\n"
        f"    * [Introduction]({pages}/intro.md)\n"
        "\nend\n"
    )
    assert target.read_text(encoding="utf-8") == expected


def test_summary_without_placeholder_appends(tmp_path):
    config = Config()
    generator = Generator(config, _tree(config))
    source = tmp_path / "in.tmpl"
    source.write_text("head\n", encoding="utf-8")
    target = tmp_path / "out.md"
    generator.summary(source, target, [SummarySection(FolderCategory.FILES, frozenset({Kind.FILE}))])
    title = config.index_files_title
    assert target.read_text(encoding="utf-8") == (
        "head\n"
        f"* [{title}]({config.index_files_name}.{config.file_ext})\n"
        f"  * [Engine.hpp]({title}/Engine_8hpp.md)\n"
        f"  * [main.cpp]({title}/main_8cpp.md)\n"
    )


def test_summary_missing_input(tmp_path):
    config = Config()
    generator = Generator(config, Doxygen(config))
    with pytest.raises(DoxybookError, match="reading"):
        generator.summary(tmp_path / "absent.tmpl", tmp_path / "out.md", [])


def test_manifest_structure(tmp_path):
    config = Config()
    config.output_dir = str(tmp_path)
    config.files_filter = [".hpp"]
    generator = Generator(config, _tree(config))
    data = generator.manifest()

    assert json.loads((tmp_path / "manifest.json").read_text(encoding="utf-8")) == data
    by_name = {entry["name"]: entry for entry in data}
    assert "main.cpp" not in by_name
    assert by_name["Engine"]["kind"] == "namespace"
    assert by_name["Engine"]["children"] == [
        {"kind": "class", "name": "Engine::Foo", "url": "cls/Foo"}
    ]
    assert by_name["audio"] == {
        "kind": "group",
        "name": "audio",
        "title": "Audio",
        "url": "grp/audio",
    }
    assert "title" not in by_name["Introduction"]
    assert "children" not in by_name["Engine.hpp"]


def test_manifest_unwritable(tmp_path):
    config = Config()
    config.output_dir = str(tmp_path / "missing" / "dir")
    generator = Generator(config, Doxygen(config))
    with pytest.raises(DoxybookError, match="writing"):
        generator.manifest()