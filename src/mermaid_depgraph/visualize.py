"""Generate Mermaid outputs from an analyzed dependency graph."""

import json
import sys
from pathlib import Path

from .config import RenderOptions
from .diagram import filter_graph, render_mermaid
from .graph import Graph
from .transform import abstract_graph, highlight_graph


def load_graph(graph_file: Path) -> Graph:
    """Load a dependency graph from the analyzer's JSON dump.

    Args:
        graph_file: Path to a JSON file with "nodes" and "relations".

    Returns:
        The parsed Graph.
    """
    with open(graph_file) as f:
        return Graph.from_dict(json.load(f))


def build_mermaid(graph: Graph, options: RenderOptions) -> str:
    """Run the full pipeline and return the flowchart text.

    Filtering happens first, then abstraction and highlighting, so that
    include/exclude words match real file paths rather than placeholders.

    Args:
        graph: Graph from the analyzer.
        options: Rendering and filtering options.

    Returns:
        Mermaid flowchart, one line per diagram statement.
    """
    filtered = filter_graph(list(options.include), list(options.exclude), graph)
    if graph.nodes and not filtered.nodes:
        print("Warning: include/exclude filters removed every node", file=sys.stderr)
    print(f"Rendering {len(filtered.nodes)} nodes and {len(filtered.relations)} relations")

    if options.abstraction:
        filtered = abstract_graph(options.abstraction, filtered)
    if options.highlight:
        filtered = highlight_graph(options.highlight, filtered)

    lines: list[str] = []
    render_mermaid(lines.append, filtered, options)
    return "".join(lines)


def generate_markdown(graph: Graph, output_file: Path, options: RenderOptions) -> None:
    """Write the flowchart into a Markdown file inside a mermaid code fence.

    Args:
        graph: Graph from the analyzer.
        output_file: Path to write the Markdown file.
        options: Rendering and filtering options.
    """
    diagram = build_mermaid(graph, options)
    with open(output_file, "w") as f:
        f.write("```mermaid\n")
        f.write(diagram)
        f.write("```\n")
    print(f"Wrote {output_file}")
