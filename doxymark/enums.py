"""Kinds, member types and folder categories with their string forms."""

from __future__ import annotations

from enum import Enum, auto
from typing import TypeVar

from doxymark.config import Config, DoxybookError


class Kind(Enum):
    CLASS = auto()
    NAMESPACE = auto()
    STRUCT = auto()
    INTERFACE = auto()
    FUNCTION = auto()
    VARIABLE = auto()
    TYPEDEF = auto()
    USING = auto()
    ENUM = auto()
    UNION = auto()
    ENUMVALUE = auto()
    DIR = auto()
    FILE = auto()
    MODULE = auto()
    FRIEND = auto()
    PAGE = auto()
    EXAMPLE = auto()
    SIGNAL = auto()
    SLOT = auto()
    PROPERTY = auto()
    EVENT = auto()
    DEFINE = auto()


class Type(Enum):
    NONE = auto()
    ATTRIBUTES = auto()
    CLASSES = auto()
    DEFINES = auto()
    FILES = auto()
    DIRS = auto()
    FRIENDS = auto()
    FUNCTIONS = auto()
    MODULES = auto()
    NAMESPACES = auto()
    TYPES = auto()
    PAGES = auto()
    EXAMPLES = auto()
    SIGNALS = auto()
    SLOTS = auto()
    EVENTS = auto()
    PROPERTIES = auto()


class Virtual(Enum):
    NON_VIRTUAL = auto()
    VIRTUAL = auto()
    PURE_VIRTUAL = auto()


class Visibility(Enum):
    PUBLIC = auto()
    PROTECTED = auto()
    PRIVATE = auto()
    PACKAGE = auto()


class FolderCategory(Enum):
    MODULES = auto()
    NAMESPACES = auto()
    FILES = auto()
    EXAMPLES = auto()
    CLASSES = auto()
    PAGES = auto()


_NAMES: dict[type, tuple[tuple[str, Enum], ...]] = {
    Kind: (
        ("class", Kind.CLASS),
        ("namespace", Kind.NAMESPACE),
        ("struct", Kind.STRUCT),
        ("interface", Kind.INTERFACE),
        ("function", Kind.FUNCTION),
        ("variable", Kind.VARIABLE),
        ("typedef", Kind.TYPEDEF),
        ("using", Kind.USING),
        ("enum", Kind.ENUM),
        ("union", Kind.UNION),
        ("enumvalue", Kind.ENUMVALUE),
        ("dir", Kind.DIR),
        ("file", Kind.FILE),
        ("group", Kind.MODULE),
        ("friend", Kind.FRIEND),
        ("page", Kind.PAGE),
        ("example", Kind.EXAMPLE),
        ("signal", Kind.SIGNAL),
        ("slot", Kind.SLOT),
        ("property", Kind.PROPERTY),
        ("event", Kind.EVENT),
        ("define", Kind.DEFINE),
    ),
    Type: (
        ("attributes", Type.ATTRIBUTES),
        ("classes", Type.CLASSES),
        ("defines", Type.DEFINES),
        ("files", Type.FILES),
        ("dirs", Type.DIRS),
        ("friends", Type.FRIENDS),
        ("functions", Type.FUNCTIONS),
        ("modules", Type.MODULES),
        ("namespaces", Type.NAMESPACES),
        ("types", Type.TYPES),
        ("pages", Type.PAGES),
        ("examples", Type.EXAMPLES),
        ("signals", Type.SIGNALS),
        ("slots", Type.SLOTS),
        ("events", Type.EVENTS),
        ("properties", Type.PROPERTIES),
    ),
    Virtual: (
        ("non-virtual", Virtual.NON_VIRTUAL),
        ("virtual", Virtual.VIRTUAL),
        ("pure", Virtual.PURE_VIRTUAL),
        ("pure-virtual", Virtual.PURE_VIRTUAL),
    ),
    Visibility: (
        ("public", Visibility.PUBLIC),
        ("protected", Visibility.PROTECTED),
        ("private", Visibility.PRIVATE),
        ("package", Visibility.PACKAGE),
    ),
    FolderCategory: (
        ("modules", FolderCategory.MODULES),
        ("namespaces", FolderCategory.NAMESPACES),
        ("files", FolderCategory.FILES),
        ("examples", FolderCategory.EXAMPLES),
        ("classes", FolderCategory.CLASSES),
        ("pages", FolderCategory.PAGES),
    ),
}

E = TypeVar("E", bound=Enum)


def _to_enum(enum_cls: type[E], text: str) -> E:
    for name, value in _NAMES[enum_cls]:
        if name == text:
            return value  # type: ignore[return-value]
    raise DoxybookError(
        f"String '{text}' not recognised as a valid enum of '{enum_cls.__name__}'"
    )


def to_enum_kind(text: str) -> Kind:
    return _to_enum(Kind, text)


def to_enum_type(text: str) -> Type:
    return _to_enum(Type, text)


def to_enum_virtual(text: str) -> Virtual:
    return _to_enum(Virtual, text)


def to_enum_visibility(text: str) -> Visibility:
    return _to_enum(Visibility, text)


def to_enum_folder_category(text: str) -> FolderCategory:
    return _to_enum(FolderCategory, text)


def to_str(value: Enum) -> str:
    """Return the first string form of an enum value."""
    pairs = _NAMES.get(type(value), ())
    for name, member in pairs:
        if member is value:
            return name
    raise DoxybookError(
        f"Enum '{type(value).__name__}' of value '{value.name}' not recognised"
    )


_KIND_TYPES = {
    Kind.DEFINE: Type.DEFINES,
    Kind.FRIEND: Type.FRIENDS,
    Kind.VARIABLE: Type.ATTRIBUTES,
    Kind.FUNCTION: Type.FUNCTIONS,
    Kind.ENUMVALUE: Type.TYPES,
    Kind.ENUM: Type.TYPES,
    Kind.USING: Type.TYPES,
    Kind.TYPEDEF: Type.TYPES,
    Kind.MODULE: Type.MODULES,
    Kind.NAMESPACE: Type.NAMESPACES,
    Kind.UNION: Type.CLASSES,
    Kind.INTERFACE: Type.CLASSES,
    Kind.STRUCT: Type.CLASSES,
    Kind.CLASS: Type.CLASSES,
    Kind.FILE: Type.FILES,
    Kind.DIR: Type.DIRS,
    Kind.PAGE: Type.PAGES,
    Kind.EXAMPLE: Type.EXAMPLES,
    Kind.SIGNAL: Type.SIGNALS,
    Kind.SLOT: Type.SLOTS,
    Kind.EVENT: Type.EVENTS,
    Kind.PROPERTY: Type.PROPERTIES,
}

_STRUCTURED = frozenset(
    {Kind.CLASS, Kind.NAMESPACE, Kind.STRUCT, Kind.UNION, Kind.INTERFACE}
)

_LANGUAGE = frozenset(
    {
        Kind.DEFINE, Kind.CLASS, Kind.NAMESPACE, Kind.STRUCT, Kind.UNION,
        Kind.INTERFACE, Kind.ENUM, Kind.FUNCTION, Kind.TYPEDEF, Kind.USING,
        Kind.FRIEND, Kind.VARIABLE, Kind.SIGNAL, Kind.SLOT, Kind.PROPERTY,
        Kind.EVENT,
    }
)


def kind_to_type(kind: Kind) -> Type:
    return _KIND_TYPES.get(kind, Type.NONE)


def is_kind_structured(kind: Kind) -> bool:
    return kind in _STRUCTURED


def is_kind_language(kind: Kind) -> bool:
    return kind in _LANGUAGE


def is_kind_file(kind: Kind) -> bool:
    return kind in (Kind.DIR, Kind.FILE)


def _category_folder(config: Config, category: FolderCategory) -> str:
    return {
        FolderCategory.MODULES: config.folder_groups_name,
        FolderCategory.CLASSES: config.folder_classes_name,
        FolderCategory.NAMESPACES: config.folder_namespaces_name,
        FolderCategory.FILES: config.folder_files_name,
        FolderCategory.PAGES: config.folder_related_pages_name,
        FolderCategory.EXAMPLES: config.folder_examples_name,
    }[category]


def type_folder_category_to_folder_name(config: Config, category: FolderCategory) -> str:
    """Folder for a category, or an empty string when folders are disabled."""
    if not config.use_folders:
        return ""
    return _category_folder(config, category)


_TYPE_CATEGORIES = {
    Type.MODULES: FolderCategory.MODULES,
    Type.CLASSES: FolderCategory.CLASSES,
    Type.NAMESPACES: FolderCategory.NAMESPACES,
    Type.DIRS: FolderCategory.FILES,
    Type.FILES: FolderCategory.FILES,
    Type.PAGES: FolderCategory.PAGES,
    Type.EXAMPLES: FolderCategory.EXAMPLES,
}


def type_to_folder_name(config: Config, type_: Type) -> str:
    """Folder for a member type, or an empty string when folders are disabled."""
    if not config.use_folders:
        return ""
    category = _TYPE_CATEGORIES.get(type_)
    if category is None:
        raise DoxybookError(f"Type {type_.name} not recognised")
    return _category_folder(config, category)


def type_to_index_name(config: Config, category: FolderCategory) -> str:
    """Path (without extension) of the index page for a category."""
    name = {
        FolderCategory.MODULES: config.index_groups_name,
        FolderCategory.CLASSES: config.index_classes_name,
        FolderCategory.NAMESPACES: config.index_namespaces_name,
        FolderCategory.FILES: config.index_files_name,
        FolderCategory.PAGES: config.index_related_pages_name,
        FolderCategory.EXAMPLES: config.index_examples_name,
    }[category]
    if config.index_in_folders and config.use_folders:
        return f"{_category_folder(config, category)}/{name}"
    return name


def type_to_index_template(config: Config, category: FolderCategory) -> str:
    return {
        FolderCategory.MODULES: config.template_index_groups,
        FolderCategory.CLASSES: config.template_index_classes,
        FolderCategory.NAMESPACES: config.template_index_namespaces,
        FolderCategory.FILES: config.template_index_files,
        FolderCategory.PAGES: config.template_index_related_pages,
        FolderCategory.EXAMPLES: config.template_index_examples,
    }[category]


def type_to_index_title(config: Config, category: FolderCategory) -> str:
    return {
        FolderCategory.MODULES: config.index_groups_title,
        FolderCategory.CLASSES: config.index_classes_title,
        FolderCategory.NAMESPACES: config.index_namespaces_title,
        FolderCategory.FILES: config.index_files_title,
        FolderCategory.PAGES: config.index_related_pages_title,
        FolderCategory.EXAMPLES: config.index_examples_title,
    }[category]