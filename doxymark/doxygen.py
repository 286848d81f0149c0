"""Index of documented compounds and lookup of nodes by refid."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from doxymark.config import Config, DoxybookError
from doxymark.enums import Kind, Type, kind_to_type

log = logging.getLogger(__name__)


@dataclass(eq=False)
class IndexNode:
    """One documented compound in the index tree."""

    refid: str
    kind: Kind | None = None
    name: str = ""
    title: str = ""
    url: str = ""
    children: list[IndexNode] = field(default_factory=list, repr=False)
    parent: IndexNode | None = field(default=None, repr=False)
    group: IndexNode | None = field(default=None, repr=False)

    @property
    def type(self) -> Type:
        """The member type this node's kind belongs to."""
        return Type.NONE if self.kind is None else kind_to_type(self.kind)

    def walk(self) -> Iterator[IndexNode]:
        """Yield every descendant, depth first, parents before children."""
        for child in self.children:
            yield child
            yield from child.walk()


def read_index_kinds(input_dir: str | Path) -> list[tuple[str, str]]:
    """Read ``(kind, refid)`` pairs of all compounds listed in ``index.xml``."""
    index_path = Path(input_dir) / "index.xml"
    try:
        tree = ET.parse(index_path)
    except OSError as exc:
        raise DoxybookError(f"Failed to open file {index_path}") from exc
    except ET.ParseError as exc:
        raise DoxybookError(f"Failed to parse file {index_path} error: {exc}") from exc

    root = tree.getroot()
    if root.tag != "doxygenindex":
        raise DoxybookError(f"Unable to find root element in file {index_path}")

    compounds = root.findall("compound")
    if not compounds:
        raise DoxybookError(f"No <compound> element in file {index_path}")

    pairs: list[tuple[str, str]] = []
    for compound in compounds:
        kind = compound.get("kind")
        refid = compound.get("refid")
        if kind is None or refid is None:
            log.warning("compound error: missing kind or refid attribute")
            continue
        pairs.append((kind, refid))
    return pairs


class Doxygen:
    """The root index of all compounds and a cache of nodes by refid."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.index = IndexNode("index")
        self.cache: dict[str, IndexNode] = {}

    def add(self, node: IndexNode) -> IndexNode:
        """Add a top-level node unless its refid is already known.

        Nodes that belong to another parent are kept out of the index's
        children, and so are nodes added earlier that have since been moved.
        """
        existing = self.cache.get(node.refid)
        if existing is not None:
            return existing
        if node.kind is Kind.PAGE and node.refid == "indexpage":
            node.refid = self.config.main_page_name
        if node.parent is None:
            node.parent = self.index
        self.index.children.append(node)
        self.index.children = [
            child for child in self.index.children if child.parent is self.index
        ]
        self.cache.setdefault(node.refid, node)
        for descendant in node.walk():
            self.cache.setdefault(descendant.refid, descendant)
        return node

    def rebuild_cache(self) -> None:
        """Register every node reachable from the index in the cache."""
        for node in self.index.walk():
            self.cache.setdefault(node.refid, node)

    def find(self, refid: str) -> IndexNode:
        """Return the node with the given refid."""
        try:
            return self.cache[refid]
        except KeyError:
            raise DoxybookError(f"Failed to find node from cache by refid {refid}") from None

    def update_group_pointers(self, node: IndexNode | None = None) -> None:
        """Point the children of every module at that module."""
        node = self.index if node is None else node
        if node.kind is Kind.MODULE:
            for child in node.children:
                child.group = node
        for child in node.children:
            if child.kind is Kind.MODULE:
                self.update_group_pointers(child)