"""Output strategies for serialising directory maps."""

from .base_strategy import OutputStrategy
from .json_strategy import JSONOutputStrategy
from .tree_strategy import TreeOutputStrategy

OUTPUT_FORMATS = ("json", "tree")


def get_output_strategy(output_format: str, *, root_name: str = ".") -> OutputStrategy:
    """Return the output strategy for a format name.

    Args:
        output_format: Either "json" or "tree".
        root_name: Root label used by the tree format.

    Raises:
        ValueError: If the format is not supported.
    """
    if output_format == "json":
        return JSONOutputStrategy()
    if output_format == "tree":
        return TreeOutputStrategy(root_name=root_name)
    raise ValueError(f"Unsupported output format: {output_format}")


__all__ = [
    "OUTPUT_FORMATS",
    "JSONOutputStrategy",
    "OutputStrategy",
    "TreeOutputStrategy",
    "get_output_strategy",
]
