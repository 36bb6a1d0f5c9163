"""Substring filtering that keeps edges between surviving boundary nodes."""

from ..graph import (
    Graph,
    Relation,
    extract_unique_nodes,
    unique_relations,
)


def _matches(path: str, words: list[str]) -> bool:
    """Check if path contains any of the words, ignoring case."""
    lowered = path.lower()
    return any(word.lower() in lowered for word in words)


def _touches(relation: Relation, words: list[str]) -> bool:
    return _matches(relation.source.path, words) or _matches(relation.target.path, words)


def filter_graph(
    include: list[str] | None,
    exclude: list[str] | None,
    graph: Graph,
) -> Graph:
    """Filter nodes and relations by path substrings.

    A relation is kept when either endpoint matches an include word and
    dropped when either endpoint matches an exclude word. Afterwards any
    original relation whose two endpoints are both still referenced by a
    kept relation is re-admitted, so edges between boundary nodes stay
    visible.

    Args:
        include: Case-insensitive words; None or empty keeps everything.
        exclude: Case-insensitive words; None or empty removes nothing.
        graph: Graph to filter. It is not modified.

    Returns:
        New Graph. Nodes are the kept nodes followed by any other relation
        endpoints, deduplicated by path.
    """
    nodes = list(graph.nodes)
    relations = list(graph.relations)

    if include:
        nodes = [n for n in nodes if _matches(n.path, include)]
        relations = [r for r in relations if _touches(r, include)]

    if exclude:
        nodes = [n for n in nodes if not _matches(n.path, exclude)]
        relations = [r for r in relations if not _touches(r, exclude)]

    # Endpoints only count while some kept node has a different path
    kept_paths = {n.path for n in nodes}
    referenced = {
        node.path
        for r in relations
        for node in (r.source, r.target)
        if len(kept_paths) > (node.path in kept_paths)
    }

    bridges = [
        r
        for r in graph.relations
        if r.source.path in referenced and r.target.path in referenced
    ]
    relations = unique_relations(relations + bridges)

    return Graph(
        nodes=extract_unique_nodes(nodes, relations),
        relations=relations,
    )

