"""Dependency graph model: files as nodes, imports as relations."""

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Node:
    """A source file in the dependency graph.

    Identity is the path alone; the remaining fields are presentation flags and
    do not take part in equality or hashing.
    """

    path: str
    file_name: str = field(default="", compare=False)
    is_directory: bool = field(default=False, compare=False)
    highlight: bool = field(default=False, compare=False)


@dataclass(frozen=True)
class Relation:
    """A directed reference from one file to another."""

    source: Node
    target: Node
    full_text: str = field(default="", compare=False)  # Raw import text, diagnostic only


@dataclass
class Graph:
    """Represents a file dependency graph."""

    nodes: list[Node] = field(default_factory=list)
    relations: list[Relation] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """Build a graph from an analyzer's JSON dump.

        Args:
            data: Mapping with "nodes" and "relations" lists. Nodes carry "path"
                and optionally "name"/"fileName", "isDirectory", "highlight".
                Relations carry "from", "to" (node mappings) and "fullText".

        Returns:
            Graph with nodes deduplicated by path.

        Raises:
            KeyError: If a node entry has no "path".
        """
        nodes = unique_nodes(_node_from_dict(n) for n in data.get("nodes", []))
        relations = [
            Relation(
                source=_node_from_dict(r["from"]),
                target=_node_from_dict(r["to"]),
                full_text=r.get("fullText", ""),
            )
            for r in data.get("relations", [])
        ]
        return cls(nodes=nodes, relations=relations)


def _node_from_dict(data: dict) -> Node:
    path = data["path"]
    name = data.get("name", data.get("fileName"))
    return Node(
        path=path,
        file_name=name if name is not None else path.split("/")[-1],
        is_directory=bool(data.get("isDirectory", False)),
        highlight=bool(data.get("highlight", False)),
    )


def unique_nodes(nodes: Iterable[Node]) -> list[Node]:
    """Drop nodes whose path was already seen, keeping first-seen order."""
    seen: set[str] = set()
    result = []
    for node in nodes:
        if node.path not in seen:
            seen.add(node.path)
            result.append(node)
    return result


def unique_relations(relations: Iterable[Relation]) -> list[Relation]:
    """Drop relations whose (source, target) paths were already seen."""
    seen: set[tuple[str, str]] = set()
    result = []
    for relation in relations:
        key = (relation.source.path, relation.target.path)
        if key not in seen:
            seen.add(key)
            result.append(relation)
    return result


def extract_unique_nodes(nodes: Iterable[Node], relations: Iterable[Relation]) -> list[Node]:
    """Merge explicit nodes with every relation endpoint.

    Args:
        nodes: Explicitly kept nodes; these come first.
        relations: Relations whose endpoints are appended in order (source, target).

    Returns:
        Nodes deduplicated by path in first-seen order.
    """
    endpoints = (n for r in relations for n in (r.source, r.target))
    return unique_nodes([*nodes, *endpoints])
