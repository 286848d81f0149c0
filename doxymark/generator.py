"""Output produced from the index: summaries, manifests and page selection."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any

from doxymark.config import Config, DoxybookError
from doxymark.doxygen import Doxygen, IndexNode
from doxymark.enums import (
    FolderCategory,
    Kind,
    to_str,
    type_to_index_name,
    type_to_index_title,
)

log = logging.getLogger(__name__)

_PLACEHOLDER = "{{doxygen}}"

_TEMPLATE_ATTRIBUTES = {
    Kind.STRUCT: "template_kind_struct",
    Kind.INTERFACE: "template_kind_interface",
    Kind.UNION: "template_kind_union",
    Kind.CLASS: "template_kind_class",
    Kind.NAMESPACE: "template_kind_namespace",
    Kind.MODULE: "template_kind_group",
    Kind.DIR: "template_kind_dir",
    Kind.FILE: "template_kind_file",
    Kind.PAGE: "template_kind_page",
    Kind.EXAMPLE: "template_kind_example",
}


@dataclass(frozen=True)
class SummarySection:
    """One category listed in a summary, with the kinds it walks and hides."""

    type: FolderCategory
    filter: frozenset[Kind] = frozenset()
    skip: frozenset[Kind] = frozenset()


class Generator:
    """Produces output files from the loaded index."""

    def __init__(self, config: Config, doxygen: Doxygen) -> None:
        self.config = config
        self.doxygen = doxygen

    def kind_to_template_name(self, kind: Kind) -> str:
        """Name of the template used to render a page of the given kind."""
        attribute = _TEMPLATE_ATTRIBUTES.get(kind)
        if attribute is None:
            raise DoxybookError(f"Unrecognised kind {kind.name}")
        return getattr(self.config, attribute)

    def should_include(self, node: IndexNode) -> bool:
        """Whether a node passes the configured file extension filter."""
        if node.kind is not Kind.FILE or not self.config.files_filter:
            return True
        return PurePosixPath(node.name).suffix in self.config.files_filter

    def summary(
        self,
        input_file: str | Path,
        output_file: str | Path,
        sections: list[SummarySection],
    ) -> None:
        """Fill the ``{{doxygen}}`` placeholder of a summary template."""
        try:
            template = Path(input_file).read_text(encoding="utf-8")
        except OSError as exc:
            raise DoxybookError(f"File {input_file} failed to open for reading") from exc

        offset = template.find(_PLACEHOLDER)
        if offset < 0:
            offset = len(template)
        prefix = template[:offset]
        indent = len(prefix) - len(prefix.rstrip(" "))

        lines: list[str] = []
        for section in sections:
            name = type_to_index_title(self.config, section.type)
            path = f"{type_to_index_name(self.config, section.type)}.{self.config.file_ext}"
            lines.append(f"{' ' * indent}* [{name}]({path})\n")
            lines.extend(
                self._summary_lines(
                    indent + 2, name, self.doxygen.index, section.filter, section.skip
                )
            )

        content = prefix + "".join(lines)[indent:] + template[offset + len(_PLACEHOLDER):]
        try:
            with open(output_file, "w", encoding="utf-8") as file:
                file.write(content)
        except OSError as exc:
            raise DoxybookError(f"File {output_file} failed to open for writing") from exc

    def _summary_lines(
        self,
        indent: int,
        folder_name: str,
        node: IndexNode,
        filter_: frozenset[Kind],
        skip: frozenset[Kind],
    ) -> Iterator[str]:
        for child in node.children:
            if child.kind is Kind.PAGE and child.refid == self.config.main_page_name:
                continue
            if child.kind not in filter_:
                continue
            if child.kind not in skip and self.should_include(child):
                yield f"{' ' * indent}* [{child.name}]({folder_name}/{child.refid}.md)\n"
            yield from self._summary_lines(indent, folder_name, child, filter_, skip)

    def manifest(self) -> list[dict[str, Any]]:
        """Write ``manifest.json`` describing the index tree and return its data."""
        data = self._manifest_entries(self.doxygen.index)
        path = Path(self.config.output_dir) / "manifest.json"
        log.info("Rendering %s", path)
        try:
            with open(path, "w", encoding="utf-8") as file:
                file.write(json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False))
        except OSError as exc:
            raise DoxybookError(f"File {path} failed to open for writing") from exc
        return data

    def _manifest_entries(self, node: IndexNode) -> list[dict[str, Any]]:
        entries: list[dict[str, Any]] = []
        for child in node.children:
            if not self.should_include(child):
                continue
            entry: dict[str, Any] = {"kind": to_str(child.kind), "name": child.name}
            if child.kind is Kind.MODULE:
                entry["title"] = child.title
            entry["url"] = child.url
            children = self._manifest_entries(child)
            if children:
                entry["children"] = children
            entries.append(entry)
        return entries