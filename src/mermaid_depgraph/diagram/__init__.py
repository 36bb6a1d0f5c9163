"""Graph filtering, directory grouping and Mermaid serialization.

Graphs are filtered by path substrings, grouped into a collapsed directory
tree and written out as a flowchart with one subgraph per directory.
"""

from .filter import filter_graph
from .render import render_mermaid
from .sanitize import to_mermaid_id, to_mermaid_label
from .tree import DirAndNodesTree, build_dir_tree, directory_of, walk_tree

__all__ = [
    "filter_graph",
    "DirAndNodesTree",
    "build_dir_tree",
    "directory_of",
    "walk_tree",
    "to_mermaid_id",
    "to_mermaid_label",
    "render_mermaid",
]
