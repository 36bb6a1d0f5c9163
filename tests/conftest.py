"""Pytest fixtures for dependency graph tests."""

import pytest

from mermaid_depgraph.graph import Graph, Node, Relation


def _node(path: str) -> Node:
    return Node(path, file_name=path.split("/")[-1])


@pytest.fixture
def bridge_graph() -> Graph:
    """Chain a -> b -> c."""
    a, b, c = _node("a"), _node("b"), _node("c")
    return Graph(
        nodes=[a, b, c],
        relations=[
            Relation(a, b, "import b"),
            Relation(b, c, "import c"),
        ],
    )


@pytest.fixture
def boundary_graph() -> Graph:
    """Graph where lib/y -> lib/q only survives an include by reattachment."""
    x, y, z = _node("src/x.ts"), _node("lib/y.ts"), _node("src/z.ts")
    q, w = _node("lib/q.ts"), _node("lib/w.ts")
    return Graph(
        nodes=[x, y, z, q, w],
        relations=[
            Relation(x, y),
            Relation(y, z),
            Relation(x, q),
            Relation(y, q),  # Bridge between two boundary nodes
            Relation(y, w),
        ],
    )


@pytest.fixture
def project_graph() -> Graph:
    """Small TypeScript project with a third-party dependency."""
    index = _node("src/index.ts")
    fmt = _node("src/utils/format.ts")
    parse = _node("src/utils/parse.ts")
    button = _node("src/components/Button.tsx")
    react = _node("node_modules/react/index.js")
    return Graph(
        nodes=[index, fmt, parse, button, react],
        relations=[
            Relation(index, fmt, "import { format } from './utils/format'"),
            Relation(index, button, "import Button from './components/Button'"),
            Relation(button, react, "import React from 'react'"),
            Relation(fmt, parse, "import { parse } from './parse'"),
        ],
    )
