"""An in-memory tree of files and folders."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

INDENT_UNIT = "  "


@dataclass(eq=False)
class FSNode:
    """A file or folder; a node of size 0 is treated as a folder."""

    name: str
    size: int = 0
    parent: Optional[FSNode] = field(default=None, repr=False)
    children: list[FSNode] = field(default_factory=list, repr=False)

    @property
    def is_dir(self) -> bool:
        return self.size == 0

    def add_child(self, child: FSNode) -> None:
        """Attach ``child`` as the last child of this node."""
        child.parent = self
        self.children.append(child)

    def __iter__(self) -> Iterator[FSNode]:
        return iter(self.children)


def create_file(name: str, size: int) -> FSNode:
    """Create a detached file node of the given size."""
    return FSNode(name=name, size=size)


def create_folder(name: str) -> FSNode:
    """Create a detached, empty folder node."""
    return FSNode(name=name)


def compute_total_size(node: Optional[FSNode]) -> int:
    """Sum the sizes of every file below ``node``."""
    if node is None:
        return 0
    return sum(
        compute_total_size(child) if child.is_dir else child.size
        for child in node.children
    )


def _structure_lines(node: FSNode, indent: int) -> Iterator[str]:
    prefix = INDENT_UNIT * max(indent, 0)
    if node.is_dir:
        yield f"{prefix}[DIR] {node.name}"
    else:
        yield f"{prefix}{node.name} ({node.size})"
    for child in node.children:
        yield from _structure_lines(child, indent + 1)


def format_structure(node: Optional[FSNode], indent: int = 0) -> str:
    """Render the tree below ``node`` as indented text, one line per node."""
    if node is None:
        return ""
    return "".join(line + "\n" for line in _structure_lines(node, indent))


def print_structure(node: Optional[FSNode], indent: int = 0) -> None:
    """Print the tree below ``node`` to standard output."""
    print(format_structure(node, indent), end="")