"""Tests for render.py module."""

import pytest

from mermaid_depgraph.config import Direction, RenderOptions
from mermaid_depgraph.diagram.render import render_mermaid
from mermaid_depgraph.graph import Graph, Node, Relation


def _render(graph: Graph, options: RenderOptions) -> list[str]:
    lines: list[str] = []
    render_mermaid(lines.append, graph, options)
    return lines


@pytest.fixture
def two_node_graph() -> Graph:
    a = Node("src/a.ts", "a.ts")
    b = Node("src/b.ts", "b.ts")
    return Graph(nodes=[a, b], relations=[Relation(a, b, "import './b'")])


class TestRenderMermaid:
    """Tests for render_mermaid function."""

    def test_end_to_end_left_to_right(self, two_node_graph):
        """Two nodes, one relation, LR direction."""
        lines = _render(two_node_graph, RenderOptions(direction=Direction.LR))

        assert lines == [
            "flowchart LR\n",
            '    subgraph src["src"]\n',
            '        src/a.ts["a.ts"]\n',
            '        src/b.ts["b.ts"]\n',
            "    end\n",
            "    src/a.ts-->src/b.ts\n",
        ]
        assert len([line for line in lines if "-->" in line]) == 1

    @pytest.mark.parametrize(
        "direction,header",
        [
            (Direction.LR, "flowchart LR\n"),
            (Direction.TB, "flowchart TB\n"),
            (None, "flowchart\n"),
        ],
    )
    def test_header(self, two_node_graph, direction, header):
        """Header is always the first line."""
        assert _render(two_node_graph, RenderOptions(direction=direction))[0] == header

    def test_class_definitions_order(self, two_node_graph):
        """dir class precedes highlight class."""
        options = RenderOptions(abstraction=("src",), highlight=("a",))
        lines = _render(two_node_graph, options)

        assert lines[1] == "    classDef dir fill:#0000,stroke:#999\n"
        assert lines[2] == "    classDef highlight fill:yellow,color:black\n"

    def test_no_class_definitions_by_default(self, two_node_graph):
        """No classDef lines without the style options."""
        lines = _render(two_node_graph, RenderOptions())

        assert not any("classDef" in line for line in lines)

    def test_nested_labels_are_relative(self):
        """Child groups show only their path below the parent group."""
        graph = Graph(nodes=[Node("a/x.ts", "x.ts"), Node("a/b/c/y.ts", "y.ts")])

        lines = _render(graph, RenderOptions())

        assert lines[1:] == [
            '    subgraph a["a"]\n',
            '        a/x.ts["x.ts"]\n',
            '        subgraph a/b/c["/b/c"]\n',
            '            a/b/c/y.ts["y.ts"]\n',
            "        end\n",
            "    end\n",
        ]

    def test_style_tags(self):
        """Highlight wins over the directory tag."""
        graph = Graph(
            nodes=[
                Node("d/plain.ts", "plain.ts"),
                Node("d/dir", "/dir", is_directory=True),
                Node("d/hot.ts", "hot.ts", highlight=True),
                Node("d/both", "/both", is_directory=True, highlight=True),
            ]
        )

        lines = _render(graph, RenderOptions())

        assert '        d/plain.ts["plain.ts"]\n' in lines
        assert '        d/dir["/dir"]:::dir\n' in lines
        assert '        d/hot.ts["hot.ts"]:::highlight\n' in lines
        assert '        d/both["/both"]:::highlight\n' in lines

    def test_identifiers_and_labels_sanitized(self):
        """Reserved characters are stripped from ids but kept in labels."""
        node = Node("pkg/my-file.ts", 'my-file".ts')
        graph = Graph(nodes=[node], relations=[Relation(node, node)])

        lines = _render(graph, RenderOptions())

        assert '        pkg/my//file.ts["my-file//.ts"]\n' in lines
        assert "    pkg/my//file.ts-->pkg/my//file.ts\n" in lines

    def test_relations_keep_order_and_duplicates(self):
        """Relations are written as given, without sorting or dedup."""
        a, b, c = Node("x/a"), Node("x/b"), Node("x/c")
        graph = Graph(
            nodes=[a, b, c],
            relations=[Relation(c, a), Relation(a, b), Relation(c, a)],
        )

        arrows = [line for line in _render(graph, RenderOptions()) if "-->" in line]

        assert arrows == ["    x/c-->x/a\n", "    x/a-->x/b\n", "    x/c-->x/a\n"]

    def test_top_level_file_only_in_relations(self):
        """Files without a directory appear only through their edges."""
        main, lib = Node("main.ts", "main.ts"), Node("lib/util.ts", "util.ts")
        graph = Graph(nodes=[main, lib], relations=[Relation(main, lib)])

        lines = _render(graph, RenderOptions())

        assert not any('main.ts["' in line for line in lines)
        assert "    main.ts-->lib/util.ts\n" in lines

    def test_links(self, project_graph):
        """Click lines follow the relations, one per grouped file."""
        options = RenderOptions(mermaid_link=True, root_dir="/repo")
        lines = _render(project_graph, options)

        clicks = [line for line in lines if line.startswith("    click ")]
        assert clicks == [
            '    click src/index.ts href "vscode://file//repo/src/index.ts" _blank\n',
            '    click src/utils/format.ts href "vscode://file//repo/src/utils/format.ts" _blank\n',
            '    click src/utils/parse.ts href "vscode://file//repo/src/utils/parse.ts" _blank\n',
            '    click src/components/Button.tsx href '
            '"vscode://file//repo/src/components/Button.tsx" _blank\n',
            '    click node//modules/react/index.js href '
            '"vscode://file//repo/node_modules/react/index.js" _blank\n',
        ]
        last_arrow = max(i for i, line in enumerate(lines) if "-->" in line)
        assert lines.index(clicks[0]) > last_arrow

    def test_each_write_is_one_line(self, project_graph):
        """Every write call carries exactly one newline-terminated line."""
        lines = _render(project_graph, RenderOptions(mermaid_link=True, root_dir="/r"))

        assert all(line.endswith("\n") and line.count("\n") == 1 for line in lines)

    def test_empty_graph(self):
        """Empty graph renders only the header."""
        assert _render(Graph(), RenderOptions()) == ["flowchart\n"]

    def test_deep_nesting(self):
        """Deeply nested groups open and close in balanced order."""
        depth = 1500
        paths = ["/".join(f"d{i}" for i in range(level + 1)) + "/f" for level in range(depth)]
        graph = Graph(nodes=[Node(p, "f") for p in paths])

        lines = _render(graph, RenderOptions())

        assert len(lines) == 1 + 3 * depth
        assert lines[-1] == "    end\n"
        innermost = [line for line in lines if line.lstrip().startswith("subgraph")][-1]
        assert innermost.startswith(" " * 4 * depth + "subgraph ")
        assert innermost.endswith(f'["/d{depth - 1}"]\n')
