"""Mermaid flowchart rendering with directory subgraphs."""

import posixpath
from collections.abc import Callable

from ..config import Direction, RenderOptions
from ..graph import Graph, Node, Relation
from .sanitize import to_mermaid_id, to_mermaid_label
from .tree import DirAndNodesTree, build_dir_tree, walk_tree

INDENT = "    "
CLASSNAME_DIR = "dir"
CLASSNAME_HIGHLIGHT = "highlight"

Write = Callable[[str], object]


def _header(direction: Direction | None) -> str:
    if direction is None:
        return "flowchart"
    return f"flowchart {direction.value}"


def _node_line(node: Node, pad: str) -> str:
    if node.highlight:
        tag = f":::{CLASSNAME_HIGHLIGHT}"
    elif node.is_directory:
        tag = f":::{CLASSNAME_DIR}"
    else:
        tag = ""
    return f'{pad}{to_mermaid_id(node.path)}["{to_mermaid_label(node.file_name)}"]{tag}'


def _write_subgraphs(write: Write, trees: list[DirAndNodesTree]) -> None:
    """Write directory groups depth-first, closing each after its children.

    Child labels drop the parent group's path, so "src" containing
    "src/utils" shows the child as "/utils".
    """
    # (tree, depth, parent dir, closing)
    stack: list[tuple[DirAndNodesTree, int, str | None, bool]] = [
        (tree, 0, None, False) for tree in reversed(trees)
    ]
    while stack:
        tree, depth, parent, closing = stack.pop()
        pad = INDENT * (depth + 1)
        if closing:
            write(f"{pad}end\n")
            continue
        label = tree.current_dir.replace(parent, "", 1) if parent else tree.current_dir
        write(f'{pad}subgraph {to_mermaid_id(tree.current_dir)}["{to_mermaid_label(label)}"]\n')
        for node in tree.nodes:
            write(_node_line(node, pad + INDENT) + "\n")
        stack.append((tree, depth, parent, True))
        stack.extend(
            (child, depth + 1, tree.current_dir, False) for child in reversed(tree.children)
        )


def _write_relations(write: Write, relations: list[Relation]) -> None:
    for relation in relations:
        source = to_mermaid_id(relation.source.path)
        target = to_mermaid_id(relation.target.path)
        write(f"{INDENT}{source}-->{target}\n")


def _write_links(write: Write, trees: list[DirAndNodesTree], root_dir: str) -> None:
    """Write a click handler per file that opens it in VS Code."""
    for _, tree in walk_tree(trees):
        for node in tree.nodes:
            target = posixpath.normpath(f"{root_dir}/{node.path}")
            node_id = to_mermaid_id(node.path)
            write(f'{INDENT}click {node_id} href "vscode://file/{target}" _blank\n')


def render_mermaid(write: Write, graph: Graph, options: RenderOptions) -> None:
    """Render graph as a Mermaid flowchart.

    Output order is: direction header, class definitions, directory
    subgraphs (depth-first), one arrow per relation in graph order, then
    optional click links. Each call to write receives one full line.

    Args:
        write: Sink called once per line, e.g. a file's write method.
        graph: Graph to render; relations are written as given.
        options: Rendering options. Filtering is not applied here.
    """
    write(_header(options.direction) + "\n")

    if options.abstraction:
        write(f"{INDENT}classDef {CLASSNAME_DIR} fill:#0000,stroke:#999\n")
    if options.highlight:
        write(f"{INDENT}classDef {CLASSNAME_HIGHLIGHT} fill:yellow,color:black\n")

    trees = build_dir_tree(graph)
    _write_subgraphs(write, trees)

    _write_relations(write, graph.relations)

    if options.mermaid_link:
        _write_links(write, trees, options.root_dir)
