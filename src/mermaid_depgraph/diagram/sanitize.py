"""Map file paths to Mermaid-safe identifiers and labels."""

import re

# Characters that break Mermaid node syntax
RESERVED_CHARS = '@[]-><{}()=&|~,"%^*_'
SEPARATOR = "//"

_RESERVED_PATTERN = re.compile("[" + re.escape(RESERVED_CHARS) + "]")

# Applied in order, as plain substring replacements
_RESERVED_WORDS = [
    ("/graph/", "/_graph_/"),
    ("style", "style_"),
    ("graph", "graph_"),
    ("class", "class_"),
]


def to_mermaid_id(path: str) -> str:
    """Convert a path into a Mermaid node identifier.

    Reserved characters are replaced by "//" and Mermaid keywords are
    suffixed with "_". The keyword rewrite is not word-boundary aware, so
    "paragraph.ts" also becomes "paragraph_.ts"; existing diagrams depend on
    that output.

    Args:
        path: File or directory path.

    Returns:
        Identifier safe to use unquoted in a flowchart.
    """
    result = SEPARATOR.join(_RESERVED_PATTERN.split(path))
    for old, new in _RESERVED_WORDS:
        result = result.replace(old, new)
    return result


def to_mermaid_label(text: str) -> str:
    """Make text safe inside a quoted Mermaid label."""
    return SEPARATOR.join(text.split('"'))
