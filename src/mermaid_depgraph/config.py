"""Diagram options and YAML config loading."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Direction(Enum):
    """Flowchart direction."""

    LR = "LR"  # left to right
    TB = "TB"  # top to bottom


# Config file key -> RenderOptions field
_CONFIG_KEYS = {
    "direction": "direction",
    "abstraction": "abstraction",
    "highlight": "highlight",
    "mermaid-link": "mermaid_link",
    "root-dir": "root_dir",
    "include": "include",
    "exclude": "exclude",
}


def _as_tuple(value) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class RenderOptions:
    """Every option recognized by the diagram pipeline.

    Attributes:
        direction: Flowchart direction, or None for Mermaid's default.
        abstraction: Directories folded into a single node. Non-empty also
            emits the "dir" class definition.
        highlight: Path words whose nodes are highlighted. Non-empty also
            emits the "highlight" class definition.
        mermaid_link: Emit "click" lines opening each file in an editor.
        root_dir: Directory the file paths are relative to; required for links.
        include: Only keep nodes whose path contains one of these words.
        exclude: Drop nodes whose path contains one of these words.
    """

    direction: Direction | None = None
    abstraction: tuple[str, ...] = ()
    highlight: tuple[str, ...] = ()
    mermaid_link: bool = False
    root_dir: str | None = None
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept lists from callers while keeping the record hashable
        for name in ("abstraction", "highlight", "include", "exclude"):
            object.__setattr__(self, name, _as_tuple(getattr(self, name)))
        if isinstance(self.direction, str):
            object.__setattr__(self, "direction", parse_direction(self.direction))
        if self.mermaid_link and not self.root_dir:
            raise ValueError("mermaid_link requires root_dir")

    @classmethod
    def from_config(cls, config: dict) -> "RenderOptions":
        """Build options from a config mapping with hyphenated keys.

        Args:
            config: Values as loaded from YAML, e.g. {"mermaid-link": True}.

        Returns:
            Validated RenderOptions.

        Raises:
            ValueError: If a key is unknown or a value is invalid.
        """
        unknown = sorted(set(config) - set(_CONFIG_KEYS))
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        kwargs = {_CONFIG_KEYS[key]: value for key, value in config.items()}
        link = kwargs.get("mermaid_link", False)
        if not isinstance(link, bool):
            raise ValueError(f"Invalid mermaid-link '{link}' (expected true or false)")
        if kwargs.get("root_dir") is not None:
            kwargs["root_dir"] = str(kwargs["root_dir"])
        return cls(**kwargs)


def parse_direction(value: str | None) -> Direction | None:
    """Parse "LR"/"TB" (any case); None or empty means unspecified."""
    if not value:
        return None
    try:
        return Direction(value.upper())
    except ValueError as err:
        raise ValueError(f"Invalid direction '{value}' (expected LR or TB)") from err


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values (empty for an empty file).
    """
    try:
        import yaml

        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    except ImportError as err:
        raise ImportError("PyYAML required for config files: pip install pyyaml") from err
