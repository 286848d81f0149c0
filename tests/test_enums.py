import pytest

from doxymark.config import Config, DoxybookError
from doxymark.enums import (
    FolderCategory,
    Kind,
    Type,
    Virtual,
    Visibility,
    is_kind_file,
    is_kind_language,
    is_kind_structured,
    kind_to_type,
    to_enum_folder_category,
    to_enum_kind,
    to_enum_type,
    to_enum_virtual,
    to_enum_visibility,
    to_str,
    type_folder_category_to_folder_name,
    type_to_folder_name,
    type_to_index_name,
    type_to_index_template,
    type_to_index_title,
)


def test_group_maps_to_module():
    assert to_enum_kind("group") is Kind.MODULE
    assert to_str(Kind.MODULE) == "group"


@pytest.mark.parametrize("kind", list(Kind))
def test_kind_round_trip(kind):
    assert to_enum_kind(to_str(kind)) is kind


@pytest.mark.parametrize("type_", [t for t in Type if t is not Type.NONE])
def test_type_round_trip(type_):
    assert to_enum_type(to_str(type_)) is type_


@pytest.mark.parametrize("vis", list(Visibility))
def test_visibility_round_trip(vis):
    assert to_enum_visibility(to_str(vis)) is vis


@pytest.mark.parametrize("cat", list(FolderCategory))
def test_folder_category_round_trip(cat):
    assert to_enum_folder_category(to_str(cat)) is cat


def test_virtual_aliases():
    assert to_enum_virtual("pure") is Virtual.PURE_VIRTUAL
    assert to_enum_virtual("pure-virtual") is Virtual.PURE_VIRTUAL
    assert to_str(Virtual.PURE_VIRTUAL) == "pure"
    assert to_enum_virtual("non-virtual") is Virtual.NON_VIRTUAL


def test_unknown_string_raises():
    with pytest.raises(DoxybookError, match="Kind"):
        to_enum_kind("bogus")


def test_type_none_has_no_string():
    with pytest.raises(DoxybookError):
        to_str(Type.NONE)


def test_kind_to_type():
    assert kind_to_type(Kind.ENUMVALUE) is Type.TYPES
    assert kind_to_type(Kind.INTERFACE) is Type.CLASSES
    assert kind_to_type(Kind.VARIABLE) is Type.ATTRIBUTES
    assert kind_to_type(Kind.DIR) is Type.DIRS


def test_kind_predicates():
    assert is_kind_structured(Kind.UNION)
    assert not is_kind_structured(Kind.FUNCTION)
    assert is_kind_language(Kind.DEFINE)
    assert not is_kind_language(Kind.PAGE)
    assert is_kind_file(Kind.DIR)
    assert not is_kind_file(Kind.CLASS)


def test_structured_kinds_are_language_kinds():
    assert all(is_kind_language(k) for k in Kind if is_kind_structured(k))


def test_folder_names_disabled():
    config = Config(use_folders=False)
    assert type_to_folder_name(config, Type.CLASSES) == ""
    assert type_folder_category_to_folder_name(config, FolderCategory.PAGES) == ""


def test_folder_names_enabled():
    config = Config(use_folders=True, folder_files_name="F", folder_groups_name="G")
    assert type_to_folder_name(config, Type.DIRS) == "F"
    assert type_to_folder_name(config, Type.FILES) == "F"
    assert type_folder_category_to_folder_name(config, FolderCategory.MODULES) == "G"


def test_folder_name_unknown_type_raises():
    with pytest.raises(DoxybookError):
        type_to_folder_name(Config(use_folders=True), Type.FUNCTIONS)


def test_index_name_in_folders():
    config = Config(
        use_folders=True,
        index_in_folders=True,
        folder_groups_name="g",
        index_groups_name="i",
    )
    assert type_to_index_name(config, FolderCategory.MODULES) == "g/i"
    config.index_in_folders = False
    assert type_to_index_name(config, FolderCategory.MODULES) == "i"


def test_index_template_and_title():
    config = Config(template_index_examples="tmpl", index_examples_title="Title")
    assert type_to_index_template(config, FolderCategory.EXAMPLES) == "tmpl"
    assert type_to_index_title(config, FolderCategory.EXAMPLES) == "Title"