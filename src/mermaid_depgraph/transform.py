"""Graph rewrites applied before rendering: highlighting and abstraction."""

from dataclasses import replace

from .graph import Graph, Node, Relation, unique_nodes, unique_relations


def highlight_graph(words: list[str] | tuple[str, ...], graph: Graph) -> Graph:
    """Mark nodes whose path contains any of the words (case-insensitive).

    Args:
        words: Substrings to highlight.
        graph: Source graph. It is not modified.

    Returns:
        New Graph whose matching nodes, including relation endpoints, have
        highlight set.
    """
    lowered = [w.lower() for w in words]

    def mark(node: Node) -> Node:
        if any(w in node.path.lower() for w in lowered):
            return replace(node, highlight=True)
        return node

    return Graph(
        nodes=[mark(n) for n in graph.nodes],
        relations=[
            replace(r, source=mark(r.source), target=mark(r.target)) for r in graph.relations
        ],
    )


def _abstract_node(node: Node, dirs: list[list[str]]) -> Node:
    """Replace node by a directory placeholder if it lives under one of dirs."""
    parts = node.path.split("/")
    for dir_parts in dirs:
        size = len(dir_parts)
        # The directory must sit above the file name, not be the file itself
        for i in range(len(parts) - size):
            if parts[i : i + size] == dir_parts:
                return Node(
                    path="/".join(parts[: i + size]),
                    file_name="/" + dir_parts[-1],
                    is_directory=True,
                )
    return node


def abstract_graph(dirs: list[str] | tuple[str, ...], graph: Graph) -> Graph:
    """Fold every file below the given directories into one node per directory.

    "src/utils" folds "src/utils/a.ts" and "src/utils/deep/b.ts" into a
    single "src/utils" placeholder. Relations are redirected to the
    placeholders; edges that become self-loops are dropped.

    Args:
        dirs: Directory paths to fold, matched as whole segments.
        graph: Source graph. It is not modified.

    Returns:
        New Graph with nodes and relations deduplicated.
    """
    dir_parts = [[p for p in d.split("/") if p] for d in dirs]
    dir_parts = [p for p in dir_parts if p]
    if not dir_parts:
        return Graph(nodes=list(graph.nodes), relations=list(graph.relations))

    relations: list[Relation] = []
    for relation in graph.relations:
        source = _abstract_node(relation.source, dir_parts)
        target = _abstract_node(relation.target, dir_parts)
        if source.path == target.path:
            continue
        relations.append(replace(relation, source=source, target=target))

    return Graph(
        nodes=unique_nodes(_abstract_node(n, dir_parts) for n in graph.nodes),
        relations=unique_relations(relations),
    )
