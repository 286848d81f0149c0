"""Generator configuration: defaults, JSON loading and saving."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)


class DoxybookError(Exception):
    """Raised when configuration, input or output cannot be processed."""


def _opt(default: Any, key: str) -> Any:
    """A dataclass field that is stored in the JSON config under ``key``."""
    if isinstance(default, list):
        return field(default_factory=lambda: list(default), metadata={"key": key})
    return field(default=default, metadata={"key": key})


@dataclass
class Config:
    """All settings that control how documentation is generated."""

    base_url: str = _opt("", "baseUrl")
    file_ext: str = _opt("md", "fileExt")
    link_suffix: str = _opt(".md", "linkSuffix")
    link_lowercase: bool = _opt(False, "linkLowercase")
    link_and_inline_code_as_html: bool = _opt(False, "linkAndInlineCodeAsHTML")
    copy_images: bool = _opt(True, "copyImages")
    sort: bool = _opt(False, "sort")
    use_folders: bool = _opt(True, "useFolders")
    images_folder: str = _opt("images", "imagesFolder")
    main_page_name: str = _opt("indexpage", "mainPageName")
    main_page_in_root: bool = _opt(False, "mainPageInRoot")
    folder_classes_name: str = _opt("Classes", "folderClassesName")
    folder_files_name: str = _opt("Files", "folderFilesName")
    folder_groups_name: str = _opt("Modules", "folderGroupsName")
    folder_namespaces_name: str = _opt("Namespaces", "folderNamespacesName")
    folder_related_pages_name: str = _opt("Pages", "folderRelatedPagesName")
    folder_examples_name: str = _opt("Examples", "folderExamplesName")
    index_in_folders: bool = _opt(False, "indexInFolders")
    index_classes_name: str = _opt("index_classes", "indexClassesName")
    index_files_name: str = _opt("index_files", "indexFilesName")
    index_groups_name: str = _opt("index_groups", "indexGroupsName")
    index_namespaces_name: str = _opt("index_namespaces", "indexNamespacesName")
    index_related_pages_name: str = _opt("index_pages", "indexRelatedPagesName")
    index_examples_name: str = _opt("index_examples", "indexExamplesName")
    template_index_classes: str = _opt("index_classes", "templateIndexClasses")
    template_index_files: str = _opt("index_files", "templateIndexFiles")
    template_index_groups: str = _opt("index_groups", "templateIndexGroups")
    template_index_namespaces: str = _opt("index_namespaces", "templateIndexNamespaces")
    template_index_related_pages: str = _opt("index_pages", "templateIndexRelatedPages")
    template_index_examples: str = _opt("index_examples", "templateIndexExamples")
    template_kind_group: str = _opt("kind_group", "templateKindGroup")
    template_kind_class: str = _opt("kind_class", "templateKindClass")
    template_kind_dir: str = _opt("kind_file", "templateKindDir")
    template_kind_page: str = _opt("kind_page", "templateKindPage")
    template_kind_interface: str = _opt("kind_class", "templateKindInterface")
    template_kind_file: str = _opt("kind_file", "templateKindFile")
    template_kind_namespace: str = _opt("kind_nonclass", "templateKindNamespace")
    template_kind_struct: str = _opt("kind_class", "templateKindStruct")
    template_kind_union: str = _opt("kind_class", "templateKindUnion")
    template_kind_example: str = _opt("kind_example", "templateKindExample")
    index_classes_title: str = _opt("Classes", "indexClassesTitle")
    index_namespaces_title: str = _opt("Namespaces", "indexNamespacesTitle")
    index_groups_title: str = _opt("Modules", "indexGroupsTitle")
    index_related_pages_title: str = _opt("Pages", "indexRelatedPagesTitle")
    index_files_title: str = _opt("Files", "indexFilesTitle")
    index_examples_title: str = _opt("Examples", "indexExamplesTitle")
    files_filter: list[str] = _opt([], "filesFilter")
    folders_to_generate: list[str] = _opt(
        ["modules", "classes", "files", "pages", "namespaces", "examples"],
        "foldersToGenerate",
    )
    formula_inline_start: str = _opt("\\(", "formulaInlineStart")
    formula_inline_end: str = _opt("\\)", "formulaInlineEnd")
    formula_block_start: str = _opt("\\[", "formulaBlockStart")
    formula_block_end: str = _opt("\\]", "formulaBlockEnd")
    output_dir: str = ""


def _keyed_fields():
    return [f for f in fields(Config) if "key" in f.metadata]


def _coerce(key: str, value: Any, current: Any) -> Any:
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        raise DoxybookError(f"Failed to get config value {key} error: expected a boolean")
    if isinstance(current, str):
        if isinstance(value, str):
            return value
        raise DoxybookError(f"Failed to get config value {key} error: expected a string")
    if isinstance(current, list):
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return list(value)
        raise DoxybookError(
            f"Failed to get config value {key} error: expected an array of strings"
        )
    return value


def _apply(config: Config, data: Any) -> None:
    if not isinstance(data, dict):
        raise DoxybookError("Failed to pase config error: root is not an object")
    try:
        for f in _keyed_fields():
            key = f.metadata["key"]
            if key in data:
                setattr(config, f.name, _coerce(key, data[key], getattr(config, f.name)))
    except DoxybookError as exc:
        raise DoxybookError(f"Failed to pase config error {exc}") from exc


def load_config_data(config: Config, src: str) -> None:
    """Update ``config`` in place from a JSON document held in ``src``."""
    try:
        data = json.loads(src)
    except json.JSONDecodeError as exc:
        raise DoxybookError(f"Failed to pase config error {exc}") from exc
    _apply(config, data)


def load_config(config: Config, path: str | Path) -> None:
    """Update ``config`` in place from the JSON file at ``path``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise DoxybookError(f"Failed to open file {path} for reading") from exc
    load_config_data(config, text)


def save_config(config: Config, path: str | Path) -> None:
    """Write every configurable setting of ``config`` to ``path`` as JSON."""
    log.info("Creating default config %s", path)
    data = {f.metadata["key"]: getattr(config, f.name) for f in _keyed_fields()}
    try:
        with open(path, "w", encoding="utf-8") as file:
            file.write(json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False))
    except OSError as exc:
        raise DoxybookError(f"Failed to open file {path} for writing") from exc